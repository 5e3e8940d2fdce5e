"""
Web 진입점

실행 방법:
    python -m web
    python -m web --host 0.0.0.0 --port 8080
    python -m web --reload   # 개발용 자동 재시작
"""

import argparse

import uvicorn

from core.constants import Defaults


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="QABank API 서버")
    parser.add_argument("--host", default=Defaults.WEB_HOST, help=f"바인드 주소 (기본값: {Defaults.WEB_HOST})")
    parser.add_argument("--port", type=int, default=Defaults.WEB_PORT, help=f"포트 (기본값: {Defaults.WEB_PORT})")
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 자동 재시작")
    parser.add_argument("--log-level", default=Defaults.LOG_LEVEL, help="uvicorn 로그 레벨")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
