from collections.abc import Generator, Sequence
from pathlib import Path

import pytest

from vite_tailwind_shadcn.exceptions import CommandExecutionError
from vite_tailwind_shadcn.executor import NodeExecutor

# Environment variables that may affect test behavior - clear before each test
_SCAFFOLD_ENV_VARS = [
    "VITE_TAILWIND_PACKAGE_MANAGER",
    "VITE_TAILWIND_PROJECT_NAME",
    "VITE_TAILWIND_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear scaffolder environment variables before each test for isolation."""
    for var in _SCAFFOLD_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


class FakeExecutor(NodeExecutor):
    """npm executor that records commands instead of running them.

    ``create`` commands make the project directory, and the Tailwind init
    command writes placeholder config files, mimicking the real tools.
    """

    def __init__(self, *, fail_on: "str | None" = None, create_dir: bool = True) -> None:
        super().__init__()
        self.executes: list[tuple[list[str], Path]] = []
        self.fail_on = fail_on
        self.create_dir = create_dir

    def execute(self, args: Sequence[str], cwd: Path) -> None:
        command = list(args)
        self.executes.append((command, cwd))
        if self.fail_on is not None and " ".join(command).startswith(self.fail_on):
            raise CommandExecutionError(command, 1)
        if command[1] == "create" and self.create_dir:
            (cwd / command[-1] / "src").mkdir(parents=True)
        if command[1:] == ["tailwindcss", "init", "-p"]:
            (cwd / "tailwind.config.js").write_text("/** generated */\nexport default {}\n")
            (cwd / "src" / "index.css").write_text(":root { color: red; }\n")

    @property
    def commands(self) -> list[str]:
        return [" ".join(command) for command, _ in self.executes]


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def executor_factory() -> "type[FakeExecutor]":
    return FakeExecutor
