"""Run the Notepad API with Uvicorn.

Usage:
    python -m notepad

Reads HOST, PORT and LOG_LEVEL from the environment or a .env file in the
working directory.
"""

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from notepad.config import get_host, get_port  # noqa: E402


def main() -> None:
    from notepad.main import app

    uvicorn.run(app, host=get_host(), port=get_port())


if __name__ == "__main__":
    main()
