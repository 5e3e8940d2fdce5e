"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → qabank/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

SERVICE_NAME: str = "QABank API"
SERVICE_VERSION: str = "1.0.0"


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 3000

    LOG_LEVEL: str = "INFO"

    # JWT 검증 (토큰 발급은 외부 IdP 담당)
    TOKEN_ALGORITHM: str = "HS256"
    TOKEN_USER_CLAIM: str = "userId"


class Pagination:
    """거래 내역 페이지네이션 상수"""

    DEFAULT_PAGE: int = 1
    DEFAULT_LIMIT: int = 20
    MAX_LIMIT: int = 100


class Money:
    """금액 표현 상수

    NUMERIC(15, 2) 컬럼과 동일한 정밀도 (소수점 2자리)
    """

    SCALE: Decimal = Decimal("0.01")
    ZERO: Decimal = Decimal("0.00")


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    SCRIPTS_LOGS_DIR: Path = LOGS_DIR / "scripts"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    PROD_DB: Path = DATA_DIR / "qabank_prod.db"
    DEV_DB: Path = DATA_DIR / "qabank_dev.db"
