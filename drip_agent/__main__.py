"""
Run the API server: `python -m drip_agent` or `drip-agent`.
"""

import uvicorn

from drip_agent.core.config import settings


def main() -> None:
    uvicorn.run(
        "drip_agent.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
