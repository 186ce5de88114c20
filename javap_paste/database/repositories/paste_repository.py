import psycopg
from psycopg.rows import dict_row

from javap_paste.database.connection import get_connection
from javap_paste.database.repositories.base import BasePasteRepository
from javap_paste.paste.exceptions import PasteNotFoundError, PasteStorageError
from javap_paste.paste.models import Paste
from javap_paste.processor.models import ProcessingInput, ProcessingOutput


class PostgresPasteRepository(BasePasteRepository):
    """Database operations for the paste table."""

    def insert(self, paste: Paste) -> None:
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO paste
                    (id, owner_token, input_code, input_compiler_name,
                     output_compiler_log, output_javap, output_procyon)
                    VALUES (%s, %s, %s, %s, %s, %s, %s)
                    """,
                    (
                        paste.id,
                        paste.owner_token,
                        paste.input.code,
                        paste.input.compiler_name,
                        paste.output.compiler_log,
                        paste.output.disassembly,
                        paste.output.decompiled,
                    ),
                )
                conn.commit()
        except psycopg.errors.UniqueViolation as exc:
            raise PasteStorageError(f"Paste {paste.id} already exists") from exc
        except psycopg.OperationalError as exc:
            raise PasteStorageError(f"Paste store unavailable: {exc}") from exc

    def find_by_id(self, paste_id: str) -> Paste | None:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        SELECT id, owner_token, input_code, input_compiler_name,
                               output_compiler_log, output_javap, output_procyon
                        FROM paste
                        WHERE id = %s
                        """,
                        (paste_id,),
                    )
                    row = cur.fetchone()
        except psycopg.OperationalError as exc:
            raise PasteStorageError(f"Paste store unavailable: {exc}") from exc

        if row is None:
            return None

        return Paste(
            id=row["id"],
            owner_token=row["owner_token"],
            input=ProcessingInput(
                code=row["input_code"],
                compiler_name=row["input_compiler_name"],
            ),
            output=ProcessingOutput(
                compiler_log=row["output_compiler_log"],
                disassembly=row["output_javap"],
                decompiled=row["output_procyon"],
            ),
        )

    def update(
        self,
        paste_id: str,
        processing_input: ProcessingInput,
        processing_output: ProcessingOutput,
    ) -> None:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        UPDATE paste
                        SET input_code = %s,
                            input_compiler_name = %s,
                            output_compiler_log = %s,
                            output_javap = %s,
                            output_procyon = %s
                        WHERE id = %s
                        """,
                        (
                            processing_input.code,
                            processing_input.compiler_name,
                            processing_output.compiler_log,
                            processing_output.disassembly,
                            processing_output.decompiled,
                            paste_id,
                        ),
                    )
                    if cur.rowcount == 0:
                        raise PasteNotFoundError(f"Paste {paste_id} not found")
                conn.commit()
        except psycopg.OperationalError as exc:
            raise PasteStorageError(f"Paste store unavailable: {exc}") from exc
