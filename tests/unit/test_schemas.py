"""
Tests for model configuration - schemas and settings load without deprecation warnings
"""
import importlib.util
import warnings
from pathlib import Path

import pytest
from pydantic.warnings import PydanticDeprecatedSince20

BACKEND = Path(__file__).resolve().parents[2] / "backend" / "gdfarms"


def _load_fresh(filename: str, module_name: str):
    spec = importlib.util.spec_from_file_location(module_name, BACKEND / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.unit
class TestModelConfig:
    @pytest.mark.parametrize(
        "filename,module_name",
        [("schemas.py", "fresh_schemas"), ("config.py", "fresh_config")],
    )
    def test_loads_without_deprecation_warning(self, filename, module_name):
        with warnings.catch_warnings():
            warnings.simplefilter("error", PydanticDeprecatedSince20)
            module = _load_fresh(filename, module_name)

        assert module is not None

    def test_analytics_dump_uses_camel_case(self):
        from gdfarms.schemas import AnalyticsResponse

        dumped = AnalyticsResponse(
            total_investment=100,
            total_revenue=150,
            total_profit=50,
            profit_margin=50,
            total_item_count=1,
        ).model_dump(by_alias=True)

        assert set(dumped) == {
            "totalInvestment",
            "totalRevenue",
            "totalProfit",
            "profitMargin",
            "totalItemCount",
            "topItems",
        }
