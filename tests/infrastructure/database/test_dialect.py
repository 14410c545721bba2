"""Tests for backend-specific SQL fragments."""

from __future__ import annotations

import pytest

from savctl.infrastructure.database.dialect import SqlGenerator


class TestSqlGenerator:
    def test_default_is_sqlite(self) -> None:
        assert SqlGenerator().dialect == "sqlite"

    def test_unsupported_dialect(self) -> None:
        with pytest.raises(ValueError, match="oracle"):
            SqlGenerator("oracle")

    @pytest.mark.parametrize(
        ("dialect", "expected"),
        [
            ("sqlite", "CAST(strftime('%m', c.dob) AS INTEGER)"),
            ("mysql", "MONTH(c.dob)"),
            ("postgresql", "EXTRACT(MONTH FROM c.dob)"),
        ],
    )
    def test_month(self, dialect: str, expected: str) -> None:
        assert SqlGenerator(dialect).month("c.dob") == expected

    @pytest.mark.parametrize(
        ("dialect", "expected"),
        [
            ("sqlite", "CAST(strftime('%d', c.dob) AS INTEGER)"),
            ("mariadb", "DAY(c.dob)"),
            ("postgresql", "EXTRACT(DAY FROM c.dob)"),
        ],
    )
    def test_day(self, dialect: str, expected: str) -> None:
        assert SqlGenerator(dialect).day("c.dob") == expected

    def test_limit_without_offset(self) -> None:
        assert SqlGenerator().limit(200) == "LIMIT 200"

    def test_limit_with_offset(self) -> None:
        assert SqlGenerator().limit(50, 100) == "LIMIT 50 OFFSET 100"

    def test_limit_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            SqlGenerator().limit("10; DROP TABLE m_office")  # type: ignore[arg-type]
