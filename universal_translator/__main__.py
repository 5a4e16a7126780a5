from __future__ import annotations

import argparse

import uvicorn

from universal_translator.core.config import settings


def main() -> int:
    parser = argparse.ArgumentParser(description="Universal Translator API")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    uvicorn.run(
        "universal_translator.main:app",
        host=str(args.host),
        port=int(args.port),
        reload=bool(args.reload),
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
