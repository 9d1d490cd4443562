"""Every use case shares the BaseUseCase contract."""

import inspect

import pytest

from quotevote.application.usecase.auth import LoginUseCase, RegisterUseCase
from quotevote.application.usecase.base import BaseUseCase
from quotevote.application.usecase.quote import (
    AddQuoteUseCase,
    CastVoteUseCase,
    GetQuoteUseCase,
    ListQuotesUseCase,
    UpdateQuoteUseCase,
)


@pytest.mark.parametrize(
    "use_case",
    [
        AddQuoteUseCase,
        CastVoteUseCase,
        GetQuoteUseCase,
        ListQuotesUseCase,
        UpdateQuoteUseCase,
        LoginUseCase,
        RegisterUseCase,
    ],
)
def test_use_case_implements_execute(use_case):
    assert issubclass(use_case, BaseUseCase)
    assert not inspect.isabstract(use_case)
    assert inspect.iscoroutinefunction(use_case.execute)


def test_base_use_case_is_abstract():
    with pytest.raises(TypeError):
        BaseUseCase()
