"""
나이 계산 유틸리티 단위 테스트
"""

import pytest
from freezegun import freeze_time

from kutils.age import get_full_age, get_korean_age, get_date_by_age
from kutils.core.exceptions import DateParseError


class TestFullAge:
    """만 나이 테스트"""

    @pytest.mark.parametrize("base_date,expected", [
        ("20090607", 34),
        ("20090608", 35),
        ("20090609", 35),
    ])
    def test_around_birthday(self, base_date, expected):
        """생일 전후 만 나이 테스트"""
        assert get_full_age("19740608", base_date) == expected

    def test_same_year(self):
        assert get_full_age("20240608", "20241231") == 0

    @freeze_time("2024-06-08 03:00:00")
    def test_default_base_date(self):
        """기준일 생략 시 오늘 기준"""
        assert get_full_age("19740608") == 50

    def test_invalid_format(self):
        with pytest.raises(DateParseError):
            get_full_age("1974-06-08", "20090607")


class TestKoreanAge:
    """한국 나이 테스트"""

    def test_korean_age(self):
        assert get_korean_age("19740608", "20090101") == 36

    @freeze_time("2024-01-15 12:00:00")
    def test_default_base_date(self):
        assert get_korean_age("20231231") == 2


class TestDateByAge:
    """나이 기준 날짜 계산 테스트"""

    def test_younger_target(self):
        assert get_date_by_age("20090901", 36, 20) == "1993-09-01"

    def test_older_target(self):
        assert get_date_by_age("20090901", 16, 20) == "2013-09-01"

    def test_same_age(self):
        """나이가 같으면 형식만 변환"""
        assert get_date_by_age("20090901", 20, 20) == "2009-09-01"
