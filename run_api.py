"""Run the PhoneCheck FastAPI service with host, port and log level from config."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

import uvicorn

from phonecheck.utils.config_loader import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "phonecheck.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload="--reload" in sys.argv[1:],
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
