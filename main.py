import sys
from dotenv import load_dotenv

load_dotenv(override=True)

from newsproxy.auth import AuthError
from newsproxy.config import load_config
from newsproxy.demo import run_demo

def main():
    try:
        config = load_config()
        run_demo(config)
    except AuthError as exc:
        print(f"▸ Bad NEWS_USERS: {exc}", file=sys.stderr)
        sys.exit(2)

if __name__ == "__main__":
    main()
