import pytest

from errorgate.core.status import Status
from errorgate.exceptions.base import APIException, ViewException
from errorgate.exceptions.mapper import ErrorTranslator
from errorgate.schemas.result import Redirect, Render, StructuredResult


class TestErrorTranslator:
    """
    ErrorTranslator.translate() picks the handler by exception family.
    """

    def test_api_exception_goes_to_api_handler(self, translator: ErrorTranslator):
        result = translator.translate(APIException(Status.FAIL_NOT_FOUND, "no such order"))
        assert isinstance(result, StructuredResult)
        assert result.status == Status.FAIL_NOT_FOUND

    def test_view_exception_goes_to_view_handler(self, translator: ErrorTranslator):
        assert isinstance(translator.translate(ViewException(404)), Redirect)
        assert isinstance(translator.translate(ViewException(500)), Render)

    def test_other_exceptions_propagate_unchanged(self, translator: ErrorTranslator):
        original = KeyError("missing")
        with pytest.raises(KeyError) as info:
            translator.translate(original)
        assert info.value is original

    def test_from_settings_uses_configured_pages_and_view(self, app_settings, fixed_clock):
        settings = app_settings.model_copy(update={"ERROR_VIEW_NAME": "failure"})
        translator = ErrorTranslator.from_settings(settings, clock=fixed_clock)

        assert translator.translate(ViewException(404)) == Redirect(url="/custom-404")
        rendered = translator.translate(ViewException(500))
        assert rendered.view_name == "failure"
