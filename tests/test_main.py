"""Testes do ponto de entrada do processo"""

import pytest

from app import main as main_module
from exceptions import ConfigurationError, ContainerError, ServerStartError


class FakeBootstrap:

    def __init__(self, error=None):
        self.error = error
        self.ran = False

    def run(self):
        self.ran = True
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_container(monkeypatch):
    def install(bootstrap=None, container_error=None, read_environment=False):
        def create_injector():
            if container_error is not None:
                raise container_error
            return object()

        monkeypatch.setattr(main_module, "create_injector", create_injector)
        monkeypatch.setattr(main_module, "get_bootstrap", lambda injector: bootstrap)
        if not read_environment:
            monkeypatch.setattr(main_module, "load_config", lambda: None)
    return install


def test_clean_shutdown_exits_zero(fake_container):
    bootstrap = FakeBootstrap()
    fake_container(bootstrap)

    assert main_module.main() == 0
    assert bootstrap.ran


@pytest.mark.parametrize("error, exit_code", [
    (ConfigurationError("PORT inválida"), 2),
    (ServerStartError("0.0.0.0", 8080, "Address already in use"), 4),
    (RuntimeError("boom"), 1),
    (KeyboardInterrupt(), 0),
])
def test_bootstrap_errors_are_mapped_to_exit_codes(fake_container, error, exit_code):
    fake_container(FakeBootstrap(error))
    assert main_module.main() == exit_code


def test_container_errors_do_not_propagate(fake_container, caplog):
    fake_container(container_error=ContainerError("UnsatisfiedRequirement"))

    assert main_module.main() == 3
    assert "UnsatisfiedRequirement" in caplog.text


@pytest.mark.parametrize("name, value", [
    ("THREADS", "abc"),
    ("THREADS", "0"),
    ("LOG_LEVEL", "debug"),
])
def test_invalid_environment_is_a_configuration_error(fake_container, monkeypatch, caplog, name, value):
    bootstrap = FakeBootstrap()
    fake_container(bootstrap, read_environment=True)
    monkeypatch.setenv(name, value)

    assert main_module.main() == 2
    assert not bootstrap.ran
    assert name in caplog.text
