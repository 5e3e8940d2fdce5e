"""
로깅 설정 유틸리티

Web과 관리 스크립트에서 사용하는 공통 로깅 설정.
- 콘솔: INFO 레벨 (stdout)
- 파일: INFO 레벨 (TimedRotatingFileHandler, 매일 자정 롤링, 7일 보관)

사용법:
    from core.logging import setup_logging
    setup_logging("web")      # Web용 로거 설정
    setup_logging("scripts")  # 관리 스크립트용 로거 설정

모듈에서는 logger = logging.getLogger(__name__) 만 사용하고
핸들러는 프로세스 진입점에서 한 번만 설정.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths


# 로그 설정 상수
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 최대 7일치 파일 유지

# 요청 로그 전용 로거 이름 (METHOD path -> status)
ACCESS_LOGGER = "web.access"

# 불필요한 로그를 생성하는 로거 목록 (WARNING으로 상향)
NOISY_LOGGERS = [
    "aiosqlite",       # DB 쿼리마다 executing/completed 로그 (매우 많음)
    "httpcore",        # HTTP 연결 상세 로그
    "httpx",           # HTTP 요청 상세 로그 (TestClient 포함)
    "asyncio",         # 비동기 이벤트 루프 로그
    "uvicorn.access",  # 요청 로그는 ACCESS_LOGGER가 대신 기록
]


def get_log_dir(process_name: str) -> Path:
    """프로세스별 로그 디렉토리 반환"""
    if process_name == "web":
        return Paths.WEB_LOGS_DIR
    elif process_name == "scripts":
        return Paths.SCRIPTS_LOGS_DIR
    return Paths.LOGS_DIR


def get_log_file_path(process_name: str) -> Path:
    """로그 파일 경로 반환 (예: logs/web/web.log)"""
    return get_log_dir(process_name) / f"{process_name}.log"


def _to_level(level: int | str) -> int:
    """"INFO" 같은 레벨 이름도 허용"""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"알 수 없는 로그 레벨: {level}")
        return resolved
    return level


def _build_file_handler(log_file: Path) -> TimedRotatingFileHandler:
    """일별 롤링 파일 핸들러 (백업 파일 형식: web.log.2026-02-21)"""
    handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    return handler


def setup_logging(
    process_name: str,
    console_level: int | str = logging.INFO,
    file_level: int | str = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 설정 (콘솔 + 파일)

    반복 호출하면 기존 핸들러를 닫고 다시 구성 (핸들러 중복 없음).

    Args:
        process_name: 프로세스 이름 ("web" 또는 "scripts"), 로그 파일 이름으로도 사용
        console_level: 콘솔 로그 레벨 (int 또는 "DEBUG"/"INFO" 등)
        file_level: 파일 로그 레벨
        log_dir: 로그 디렉토리 (None이면 프로세스별 기본 경로)

    Returns:
        설정된 루트 Logger
    """
    log_dir = log_dir or get_log_dir(process_name)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{process_name}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 필터링은 핸들러 레벨에서

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    file_handler = _build_file_handler(log_file)
    for handler, level in ((console_handler, console_level), (file_handler, file_level)):
        handler.setLevel(_to_level(level))
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"로깅 초기화 완료: {process_name} "
        f"(console={logging.getLevelName(console_handler.level)}, "
        f"file={log_file} {logging.getLevelName(file_handler.level)}, "
        f"보관 {LOG_FILE_BACKUP_COUNT}일)"
    )

    return root_logger
