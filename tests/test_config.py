"""Tests for ContextVar-based tokenize configuration."""

from threading import Thread

import pytest

from tinta import (
    TokenizeConfig,
    create_registry_with_defaults,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize,
    tokenize_config_context,
)
from tinta.grammars import TOML


class TestTokenizeConfigDataclass:
    """TokenizeConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = TokenizeConfig()
        assert config.strip_snippet is False
        assert config.grammar_registry is None

    def test_immutability(self) -> None:
        config = TokenizeConfig()
        with pytest.raises(AttributeError):
            config.strip_snippet = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = TokenizeConfig.from_dict({"strip_snippet": True, "theme": "orange"})
        assert config.strip_snippet is True
        assert config.grammar_registry is None

    def test_from_dict_empty(self) -> None:
        assert TokenizeConfig.from_dict({}) == TokenizeConfig()


class TestContextVarFunctions:
    """get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_tokenize_config()

    def test_default_config(self) -> None:
        assert get_tokenize_config() == TokenizeConfig()

    def test_set_and_reset(self) -> None:
        set_tokenize_config(TokenizeConfig(strip_snippet=True))
        assert get_tokenize_config().strip_snippet is True
        reset_tokenize_config()
        assert get_tokenize_config().strip_snippet is False

    def test_context_manager_restores_previous(self) -> None:
        with tokenize_config_context(TokenizeConfig(strip_snippet=True)):
            assert get_tokenize_config().strip_snippet is True
        assert get_tokenize_config().strip_snippet is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with tokenize_config_context(TokenizeConfig(strip_snippet=True)):
                raise RuntimeError("boom")
        assert get_tokenize_config().strip_snippet is False


class TestConfigEffects:
    """Config changes what tokenize() does."""

    def test_strip_snippet(self) -> None:
        code = "\n\n  echo hi  \n\n"
        assert len(tokenize(code, "bash")) == 5
        with tokenize_config_context(TokenizeConfig(strip_snippet=True)):
            doc = tokenize(code, "bash")
        assert len(doc) == 1
        assert doc.text == "echo hi"

    def test_config_registry_is_used(self) -> None:
        registry = create_registry_with_defaults().set_fallback(TOML).build()
        with tokenize_config_context(TokenizeConfig(grammar_registry=registry)):
            assert tokenize("a = 1", "ini").language == "toml"
        assert tokenize("a = 1", "ini").language == "text"

    def test_explicit_registry_wins_over_config(self) -> None:
        config_registry = create_registry_with_defaults().set_fallback(TOML).build()
        explicit = create_registry_with_defaults().build()
        with tokenize_config_context(TokenizeConfig(grammar_registry=config_registry)):
            assert tokenize("a = 1", "ini", registry=explicit).language == "text"


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_worker_config_does_not_leak(self) -> None:
        seen: dict[str, bool] = {}

        def worker() -> None:
            set_tokenize_config(TokenizeConfig(strip_snippet=True))
            seen["worker"] = get_tokenize_config().strip_snippet

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen["worker"] is True
        assert get_tokenize_config().strip_snippet is False
