from __future__ import annotations

import pytest

from eventapi.application.use_cases.users.authenticate_token import \
    AuthenticateTokenUseCase
from eventapi.application.use_cases.users.login_user import LoginUserUseCase
from eventapi.application.use_cases.users.logout_user import LogoutUserUseCase
from eventapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from eventapi.domain.users.exceptions import (EmailAlreadyRegisteredError,
                                              InvalidCredentialsError)

from .fakes import (DeterministicHasher, InMemoryTokenRepository,
                    InMemoryUserRepository)


@pytest.fixture()
def repositories() -> tuple[InMemoryUserRepository, InMemoryTokenRepository]:
    return InMemoryUserRepository(), InMemoryTokenRepository()


def _register(users, tokens) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def _login(users, tokens) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def test_register_user_success(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
) -> None:
    users, tokens = repositories

    user, token = _register(users, tokens).execute("Alice", " Alice@Example.com ", "secret123")

    assert user.id == 1
    assert user.email == "alice@example.com"
    assert user.password_hash == "hashed:secret123"
    assert tokens.resolve(token) == user.id


def test_register_user_duplicate_email_raises(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
) -> None:
    users, tokens = repositories
    use_case = _register(users, tokens)
    use_case.execute("Alice", "alice@example.com", "secret123")

    with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
        use_case.execute("Other", "ALICE@example.com", "another123")

    assert exc_info.value.to_dict() == {"error": "register_failed", "message": "Register failed"}


def test_login_replaces_previous_token(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
) -> None:
    users, tokens = repositories
    _, first = _register(users, tokens).execute("Alice", "alice@example.com", "secret123")

    user, second = _login(users, tokens).execute("alice@example.com", "secret123")

    assert second != first
    assert tokens.resolve(second) == user.id
    assert tokens.resolve(first) is None


@pytest.mark.parametrize(
    ("email", "password"),
    [("alice@example.com", "wrong-password"), ("nobody@example.com", "secret123")],
)
def test_login_rejects_bad_credentials_uniformly(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
    email: str,
    password: str,
) -> None:
    users, tokens = repositories
    _register(users, tokens).execute("Alice", "alice@example.com", "secret123")

    with pytest.raises(InvalidCredentialsError) as exc_info:
        _login(users, tokens).execute(email, password)

    assert exc_info.value.code == "unauthorized"
    assert int(exc_info.value.status) == 401


def test_logout_revokes_token(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
) -> None:
    users, tokens = repositories
    _, token = _register(users, tokens).execute("Alice", "alice@example.com", "secret123")

    LogoutUserUseCase(tokens=tokens).execute(token)

    assert AuthenticateTokenUseCase(tokens=tokens).execute(token) is None


def test_authenticate_empty_token_returns_none(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
) -> None:
    _, tokens = repositories

    assert AuthenticateTokenUseCase(tokens=tokens).execute("") is None


class CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(hashed)
        return super().verify(password, hashed)


def test_unknown_email_still_verifies_a_hash(
    repositories: tuple[InMemoryUserRepository, InMemoryTokenRepository],
) -> None:
    users, tokens = repositories
    hasher = CountingHasher()
    login = LoginUserUseCase(users=users, tokens=tokens, password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@example.com", "secret123")

    assert len(hasher.verified) == 1
    assert hasher.verified[0].startswith("hashed:")
