"""Tests for Tablero utility modules."""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_adds_prefix(self) -> None:
        from tablero.utils.logger import get_logger

        assert get_logger("editor").name == "tablero.editor"

    def test_keeps_existing_prefix(self) -> None:
        from tablero.utils.logger import get_logger

        assert get_logger("tablero.editor").name == "tablero.editor"
        assert get_logger("tablero").name == "tablero"

    def test_does_not_match_similar_prefix(self) -> None:
        from tablero.utils.logger import get_logger

        assert get_logger("tableroish").name == "tablero.tableroish"
