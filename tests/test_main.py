"""Tests for the command-line entry point."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from nws_weather_core.__main__ import main


class TestMain:
    """Tests for argument handling in main()."""

    def test_unknown_log_level_is_usage_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unknown log level exits with a usage error before starting."""
        with patch("nws_weather_core.__main__.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main(["--log-level", "verbose"])

        assert exc_info.value.code == 2
        assert "--log-level" in capsys.readouterr().err
        mock_run.assert_not_called()

    def test_log_level_is_case_insensitive(self) -> None:
        """Lowercase level names are accepted."""
        with (
            patch("nws_weather_core.__main__.asyncio.run") as mock_asyncio_run,
            patch("nws_weather_core.__main__.run", new_callable=MagicMock) as mock_run,
            patch("nws_weather_core.__main__.logging.basicConfig") as mock_basic,
        ):
            main(["--log-level", "debug"])

        assert mock_basic.call_args.kwargs["level"] == "DEBUG"
        mock_run.assert_called_once()
        mock_asyncio_run.assert_called_once_with(mock_run.return_value)
