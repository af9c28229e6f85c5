"""Tests for the lookup pipeline with a mocked forecast fetcher."""

from unittest.mock import MagicMock

import pytest

from lifecast.forecast.aggregator import parse
from lifecast.ingest.forecast_fetcher import ForecastFetcher
from lifecast.ingest.kma_client import KmaApiError
from lifecast.models.geo import GridCell
from lifecast.models.index import IndexId
from lifecast.pipeline.lookup_pipeline import (
    UNNAMED_LOCATION,
    LookupPipeline,
    UnknownCityError,
)


@pytest.fixture
def mock_fetcher(seoul_items) -> MagicMock:
    fetcher = MagicMock(spec=ForecastFetcher)
    fetcher.fetch.return_value = parse(seoul_items)
    return fetcher


@pytest.fixture
def pipeline(default_config, mock_fetcher, params) -> LookupPipeline:
    return LookupPipeline(default_config, fetcher=mock_fetcher, params=params)


class TestLookupPipeline:
    def test_run_coordinates(self, pipeline, mock_fetcher):
        result = pipeline.run(37.5665, 126.9780, "Seoul")

        mock_fetcher.fetch.assert_called_once_with(GridCell(60, 127))
        assert result.location_name == "Seoul"
        assert result.cell == GridCell(60, 127)
        assert result.point.latitude == 37.5665
        assert len(result.indices) == 8
        assert result.indices[0].id == IndexId.LAUNDRY
        assert result.duration_seconds >= 0

    def test_unnamed_location(self, pipeline):
        assert pipeline.run(35.1796, 129.0756).location_name == UNNAMED_LOCATION

    def test_run_city_uses_stored_cell(self, pipeline, mock_fetcher):
        result = pipeline.run_city("jeju")

        mock_fetcher.fetch.assert_called_once_with(GridCell(53, 38))
        assert result.location_name == "Jeju"

    def test_unknown_city(self, pipeline, mock_fetcher):
        with pytest.raises(UnknownCityError, match="Atlantis"):
            pipeline.run_city("Atlantis")
        mock_fetcher.fetch.assert_not_called()

    def test_run_default_location(self, pipeline, mock_fetcher):
        result = pipeline.run_default()

        assert result.location_name == "Seoul"
        mock_fetcher.fetch.assert_called_once_with(GridCell(60, 127))

    def test_fetch_error_propagates(self, pipeline, mock_fetcher):
        mock_fetcher.fetch.side_effect = KmaApiError("KMA error 22: limit", "22")
        with pytest.raises(KmaApiError):
            pipeline.run(37.5665, 126.9780)

    def test_default_fetcher_built_from_config(self, default_config):
        pipeline = LookupPipeline(default_config)
        assert pipeline.fetcher.freshness_minutes == 10
        assert pipeline.fetcher.kma.max_retries == 3
