"""
Run the KML Viewer API with uvicorn.
"""

import uvicorn

from kmlview.core.config import settings


def main() -> None:
    uvicorn.run("kmlview.api.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
