from __future__ import annotations

import argparse
from collections.abc import Sequence

import uvicorn

from resume_ats.core.config import settings


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the resume ATS scoring API.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only).")
    args = parser.parse_args(argv)

    uvicorn.run(
        "resume_ats.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
