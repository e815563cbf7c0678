# server_env/__main__.py
import sys
from dotenv import load_dotenv
from server_env.api_error import ConfigurationError
from server_env.config import initialize_config, get_logger


def main() -> int:
    # Variables already in the environment win over the local .env file
    load_dotenv(override=False)
    try:
        config = initialize_config()
    except ConfigurationError as e:
        # Can't use logger yet - this is a fatal startup error
        print(f"FATAL: Configuration error:\n{e}", file=sys.stderr)
        return 1

    get_logger(__name__).info("Server URL resolved", server_url=config.server_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
