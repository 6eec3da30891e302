"""
Unit tests for the Streamlit panels.

Streamlit is replaced by a MagicMock so the HTML handed to st.markdown can
be inspected.
"""

from unittest.mock import MagicMock, patch

import pytest

from skyview.core.styles import get_style_manager
from skyview.models.weather import ForecastEntry, UnitSystem
from skyview.ui import components, forecast


def _entry(description="clear sky", date_label="Mon, Jan 15"):
    return ForecastEntry(
        dt=1705320000,
        date_label=date_label,
        temp=15,
        temp_max=15,
        temp_min=10,
        icon="01d",
        description=description,
    )


@pytest.fixture
def mock_st():
    with patch("skyview.ui.forecast.st") as st_mock:
        st_mock.columns.side_effect = lambda n: [MagicMock() for _ in range(n)]
        yield st_mock


def _card_html(mock_st):
    return [
        c.args[0] for c in mock_st.markdown.call_args_list if "forecast-card" in c.args[0]
    ]


class TestForecastCards:
    """Test forecast card markup."""

    def test_description_quotes_escaped(self, mock_st):
        forecast.render([_entry(description='x" onerror="alert(1)')], UnitSystem.METRIC)

        html = _card_html(mock_st)[0]
        assert 'onerror="alert(1)"' not in html
        assert 'alt="x&quot; onerror=&quot;alert(1)&quot;"' in html

    def test_date_label_escaped(self, mock_st):
        forecast.render([_entry(date_label="<b>Mon</b>")], UnitSystem.METRIC)

        html = _card_html(mock_st)[0]
        assert "<b><b>Mon</b></b>" not in html
        assert "&lt;b&gt;Mon&lt;/b&gt;" in html

    def test_one_card_per_day(self, mock_st):
        forecast.render([_entry(), _entry(date_label="Tue, Jan 16")], UnitSystem.IMPERIAL)

        cards = _card_html(mock_st)
        assert len(cards) == 2
        assert "15°F / 10°F" in cards[0]
        mock_st.plotly_chart.assert_called_once()

    def test_empty_forecast(self, mock_st):
        forecast.render([], UnitSystem.METRIC)

        mock_st.caption.assert_called_once_with("No forecast available.")
        mock_st.plotly_chart.assert_not_called()


class TestMetricTile:
    def test_label_and_value_escaped(self):
        tile = get_style_manager().build_metric_tile("<i>Humidity</i>", '81" x="y')

        assert "<i>" not in tile
        assert '81&quot; x=&quot;y' in tile


class TestViewerIp:
    """Test viewer address lookup from the Streamlit request context."""

    @staticmethod
    def _context(headers=None, ip=None):
        st_mock = MagicMock()
        st_mock.context.headers = headers or {}
        st_mock.context.ip_address = ip
        return patch("skyview.ui.components.st", st_mock)

    def test_forwarded_header_first_hop(self):
        with self._context({"X-Forwarded-For": "8.8.8.8, 10.0.0.1"}, ip="1.1.1.1"):
            assert components.get_viewer_ip() == "8.8.8.8"

    def test_peer_address(self):
        with self._context(ip="1.1.1.1"):
            assert components.get_viewer_ip() == "1.1.1.1"

    @pytest.mark.parametrize("ip", [None, "127.0.0.1", "192.168.1.20", "not-an-ip"])
    def test_local_or_missing(self, ip):
        with self._context(ip=ip):
            assert components.get_viewer_ip() is None
