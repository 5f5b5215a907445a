import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_defaults_are_positive():
    settings = Settings()

    assert settings.recent_games_limit == 10
    assert settings.report_default_days == 90


@pytest.mark.parametrize("field", ["recent_games_limit", "report_default_days", "page_size_default"])
def test_non_positive_values_rejected(field):
    with pytest.raises(ValidationError):
        Settings(**{field: 0})
