from enum import Enum


class IamRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"
