from javap_paste.database.repositories.base import BasePasteRepository
from javap_paste.logging.logger import Log
from javap_paste.paste.default_paste import DefaultPasteRegistry, is_default_id
from javap_paste.paste.dto import PasteCreate, PasteDto, PasteUpdate
from javap_paste.paste.exceptions import NotAuthorizedError, PasteNotFoundError
from javap_paste.paste.models import Paste
from javap_paste.paste.tokens import generate_paste_id, validate_token
from javap_paste.processor.base import BaseProcessor
from javap_paste.sdk.registry import find_sdk


class PasteService:
    """Creates, reads and updates pastes on behalf of token holders.

    Default pastes (``default:<LANGUAGE>``) are answered from the registry
    and can never be modified. Stored pastes may only be updated with the
    token they were created with. Output is always computed before anything
    is written, so a failed pipeline run leaves storage untouched.
    """

    def __init__(
        self,
        repository: BasePasteRepository,
        processor: BaseProcessor,
        default_pastes: DefaultPasteRegistry,
    ) -> None:
        self._repository = repository
        self._processor = processor
        self._default_pastes = default_pastes

    def create_paste(self, token: str | None, request: PasteCreate) -> PasteDto:
        """Compile the request input and store it as a new paste owned by ``token``.

        Raises:
            InvalidTokenError: if the token is unusable.
            UnknownSdkError: if the compilerName is not a known SDK.
        """
        owner_token = validate_token(token)
        find_sdk(request.input.compiler_name)

        paste_id = generate_paste_id()
        output = self._processor.process(request.input)
        paste = Paste(id=paste_id, owner_token=owner_token, input=request.input, output=output)
        self._repository.insert(paste)
        Log.info(f"Created paste {paste_id} ({request.input.compiler_name})")
        return self._to_dto(paste, editable=True)

    def get_paste(self, token: str | None, paste_id: str) -> PasteDto:
        """Return the paste view; ``editable`` tells whether ``token`` owns it.

        Raises:
            PasteNotFoundError: if neither a default nor a stored paste has this id.
        """
        if is_default_id(paste_id):
            default_paste = self._default_pastes.lookup(paste_id)
            if default_paste is None:
                raise PasteNotFoundError(f"Paste {paste_id} not found")
            return PasteDto(
                id=default_paste.id,
                editable=False,
                input=default_paste.input,
                output=default_paste.output,
            )

        paste = self._find(paste_id)
        return self._to_dto(paste, editable=bool(token) and token == paste.owner_token)

    def update_paste(
        self,
        token: str | None,
        paste_id: str,
        request: PasteUpdate,
    ) -> PasteDto:
        """Replace the input of an owned paste and recompute its output.

        Raises:
            InvalidTokenError: if the token is unusable.
            PasteNotFoundError: if the id is a default paste or unknown.
            NotAuthorizedError: if the token does not own the paste.
            UnknownSdkError: if the new compilerName is not a known SDK.
        """
        owner_token = validate_token(token)
        if is_default_id(paste_id):
            raise PasteNotFoundError(f"Paste {paste_id} not found")

        paste = self._find(paste_id)
        if paste.owner_token != owner_token:
            Log.warning(f"Denied update of paste {paste_id}: token does not own it")
            raise NotAuthorizedError(f"Not the owner of paste {paste_id}")
        find_sdk(request.input.compiler_name)

        output = self._processor.process(request.input)
        self._repository.update(paste_id, request.input, output)
        Log.info(f"Updated paste {paste_id} ({request.input.compiler_name})")
        return self._to_dto(
            Paste(id=paste_id, owner_token=owner_token, input=request.input, output=output),
            editable=True,
        )

    def _find(self, paste_id: str) -> Paste:
        paste = self._repository.find_by_id(paste_id)
        if paste is None:
            raise PasteNotFoundError(f"Paste {paste_id} not found")
        return paste

    @staticmethod
    def _to_dto(paste: Paste, *, editable: bool) -> PasteDto:
        return PasteDto(id=paste.id, editable=editable, input=paste.input, output=paste.output)
