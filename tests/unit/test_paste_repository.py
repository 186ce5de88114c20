from unittest.mock import MagicMock, patch

import psycopg
import pytest

from javap_paste.database.repositories.paste_repository import PostgresPasteRepository
from javap_paste.paste.exceptions import PasteNotFoundError, PasteStorageError
from javap_paste.paste.models import Paste
from javap_paste.processor.models import ProcessingInput, ProcessingOutput


def _make_row() -> dict:
    return {
        "id": "aB3dE5fG7hJ9",
        "owner_token": "abcdef",
        "input_code": "class Main {}",
        "input_compiler_name": "JDK_21",
        "output_compiler_log": "",
        "output_javap": "class Main",
        "output_procyon": "class Main {}",
    }


def _make_paste() -> Paste:
    return Paste(
        id="aB3dE5fG7hJ9",
        owner_token="abcdef",
        input=ProcessingInput(code="class Main {}", compiler_name="JDK_21"),
        output=ProcessingOutput(
            compiler_log="", disassembly="class Main", decompiled="class Main {}"
        ),
    )


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    """Wire up a mock connection + cursor and return (mock_conn, mock_cursor)."""
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestInsert:
    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_inserts_all_columns_and_commits(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)

        PostgresPasteRepository().insert(_make_paste())

        params = mock_conn.execute.call_args.args[1]
        assert params == (
            "aB3dE5fG7hJ9",
            "abcdef",
            "class Main {}",
            "JDK_21",
            "",
            "class Main",
            "class Main {}",
        )
        mock_conn.commit.assert_called_once()

    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_duplicate_id_raises_storage_error(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)
        mock_conn.execute.side_effect = psycopg.errors.UniqueViolation("duplicate key")

        with pytest.raises(PasteStorageError, match="already exists"):
            PostgresPasteRepository().insert(_make_paste())

    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_unreachable_store_raises_storage_error(self, mock_get_conn: MagicMock) -> None:
        mock_get_conn.side_effect = psycopg.OperationalError("connection refused")

        with pytest.raises(PasteStorageError, match="unavailable"):
            PostgresPasteRepository().insert(_make_paste())


class TestFindById:
    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_returns_paste_when_found(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        result = PostgresPasteRepository().find_by_id("aB3dE5fG7hJ9")

        assert result == _make_paste()

    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_returns_none_when_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        assert PostgresPasteRepository().find_by_id("xyz") is None


class TestUpdate:
    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_updates_input_and_output_together(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 1
        paste = _make_paste()

        PostgresPasteRepository().update(paste.id, paste.input, paste.output)

        mock_cursor.execute.assert_called_once()
        params = mock_cursor.execute.call_args.args[1]
        assert params == (
            "class Main {}",
            "JDK_21",
            "",
            "class Main",
            "class Main {}",
            "aB3dE5fG7hJ9",
        )
        mock_conn.commit.assert_called_once()

    @patch("javap_paste.database.repositories.paste_repository.get_connection")
    def test_raises_not_found_when_no_row(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 0
        paste = _make_paste()

        with pytest.raises(PasteNotFoundError, match="Paste xyz not found"):
            PostgresPasteRepository().update("xyz", paste.input, paste.output)

        mock_conn.commit.assert_not_called()
