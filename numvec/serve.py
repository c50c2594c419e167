"""Run the numvec service under uvicorn."""
from __future__ import annotations

import uvicorn

from numvec.config import get_settings
from numvec.observability.logging import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    # log_config=None keeps uvicorn from replacing the handlers set up above
    uvicorn.run("numvec.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
