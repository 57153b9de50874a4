#!/usr/bin/env python
from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from pos_api.config import settings
from pos_api.core.security import create_access_token


def run(subject: str, minutes: int) -> str:
    return create_access_token({"sub": subject}, expires_delta=timedelta(minutes=minutes))


def main() -> None:
    parser = argparse.ArgumentParser(description="Emite un token JWT para AUTH_MODE=jwt.")
    parser.add_argument("subject", help="Identificador del cliente (claim sub)")
    parser.add_argument(
        "--minutes",
        type=int,
        default=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        help="Minutos de validez del token",
    )
    args = parser.parse_args()
    if settings.AUTH_MODE != "jwt":
        print(f"Aviso: AUTH_MODE={settings.AUTH_MODE}; el token no sera exigido.", file=sys.stderr)
    print(run(args.subject, args.minutes))


if __name__ == "__main__":
    main()
