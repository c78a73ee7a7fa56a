import argparse
from datetime import timedelta

from shared.core.auth import create_access_token


def main():
    parser = argparse.ArgumentParser(
        description="Mint a bearer token for the inventory API")
    parser.add_argument("user_id")
    parser.add_argument("--workspace-id", default=None)
    parser.add_argument("--role", choices=["USER", "ADMIN"], default=None)
    parser.add_argument("--days", type=int, default=365,
                        help="token lifetime in days")
    args = parser.parse_args()

    payload = {"user_id": args.user_id}
    if args.workspace_id:
        payload["workspace_id"] = args.workspace_id
    if args.role:
        payload["role"] = args.role

    print(create_access_token(payload, expires_delta=timedelta(days=args.days)))


if __name__ == "__main__":
    main()
