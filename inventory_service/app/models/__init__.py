# Import all models to ensure they are registered with SQLAlchemy
from .users import User
from .workspaces import Workspace
from .iam import Iam
from .categories import Category
from .locations import Location
from .item_types import Type
from .items import Item
