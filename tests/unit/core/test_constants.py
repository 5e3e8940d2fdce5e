"""
core/constants.py 테스트

모든 경로가 pathlib.Path 타입이고, 상수가 정상적으로 접근 가능한지 확인
"""

from decimal import Decimal
from pathlib import Path

from core.constants import (
    PROJECT_ROOT,
    SERVICE_VERSION,
    Defaults,
    Money,
    Pagination,
    Paths,
)


class TestProjectRoot:
    """PROJECT_ROOT 테스트"""

    def test_project_root_is_path(self) -> None:
        """PROJECT_ROOT가 Path 타입인지 확인"""
        assert isinstance(PROJECT_ROOT, Path)

    def test_project_root_is_absolute(self) -> None:
        """PROJECT_ROOT가 절대 경로인지 확인"""
        assert PROJECT_ROOT.is_absolute()

    def test_project_root_contains_core_directory(self) -> None:
        """PROJECT_ROOT에 core 디렉토리가 있는지 확인"""
        assert (PROJECT_ROOT / "core").is_dir()


class TestPaths:
    """Paths 테스트"""

    def test_all_paths_are_path_type(self) -> None:
        """모든 경로가 Path 타입인지 확인"""
        for name in [
            "CONFIG_DIR",
            "DATA_DIR",
            "LOGS_DIR",
            "WEB_LOGS_DIR",
            "SCRIPTS_LOGS_DIR",
            "SETTINGS_FILE",
            "PROD_DB",
            "DEV_DB",
        ]:
            assert isinstance(getattr(Paths, name), Path), name

    def test_db_files_in_data_dir(self) -> None:
        """DB 파일은 data 디렉토리 아래"""
        assert Paths.PROD_DB.parent == Paths.DATA_DIR
        assert Paths.DEV_DB.parent == Paths.DATA_DIR
        assert Paths.PROD_DB != Paths.DEV_DB

    def test_settings_file(self) -> None:
        assert Paths.SETTINGS_FILE == Paths.CONFIG_DIR / "settings.yaml"


class TestDefaults:
    """Defaults 테스트"""

    def test_web_defaults(self) -> None:
        assert Defaults.WEB_HOST == "127.0.0.1"
        assert Defaults.WEB_PORT == 3000

    def test_token_defaults(self) -> None:
        assert Defaults.TOKEN_ALGORITHM == "HS256"
        assert Defaults.TOKEN_USER_CLAIM == "userId"

    def test_service_version(self) -> None:
        assert SERVICE_VERSION == "1.0.0"


class TestPagination:
    """Pagination 테스트"""

    def test_values(self) -> None:
        assert Pagination.DEFAULT_PAGE == 1
        assert Pagination.DEFAULT_LIMIT == 20
        assert Pagination.MAX_LIMIT == 100


class TestMoney:
    """Money 테스트"""

    def test_two_fractional_digits(self) -> None:
        assert Money.SCALE == Decimal("0.01")
        assert str(Money.ZERO) == "0.00"
