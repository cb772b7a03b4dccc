"""Test fixtures for qed-ssg."""

import shutil
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from qed_ssg import Adapter, AdapterSpec, ExecutionResult, QedConfig
from qed_ssg.tools import OperationSpec, ParamSpec

PYTHON = sys.executable


# =============================================================================
# Fake process runner
# =============================================================================


@dataclass
class RunnerCall:
    """One recorded call to the fake runner."""

    method: str
    binary: str
    args: tuple[str, ...]
    cwd: str | None = None
    timeout: float | None = None


@dataclass
class FakeRunner:
    """Records invocations and returns canned results without spawning."""

    config: QedConfig = field(default_factory=QedConfig)
    result: ExecutionResult = field(
        default_factory=lambda: ExecutionResult.from_exit(0, "fake 1.2.3\n", "")
    )
    calls: list[RunnerCall] = field(default_factory=list)
    closed: bool = False

    async def run(
        self,
        binary: str,
        args: Sequence[str] = (),
        *,
        timeout: float | None = None,
        cwd: str | None = None,
    ) -> ExecutionResult:
        self.calls.append(RunnerCall("run", binary, tuple(args), cwd, timeout))
        return self.result

    async def start(
        self,
        binary: str,
        args: Sequence[str] = (),
        *,
        cwd: str | None = None,
        startup_grace: float | None = None,
    ) -> ExecutionResult:
        self.calls.append(RunnerCall("start", binary, tuple(args), cwd))
        return self.result

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last(self) -> RunnerCall:
        return self.calls[-1]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


# =============================================================================
# Adapter specs
# =============================================================================


def make_spec(name: str = "demo", binary: str = "demo-ssg", language: str = "Rust") -> AdapterSpec:
    """A small but contract-conforming adapter spec."""
    return AdapterSpec(
        name=name,
        display_name=name.title(),
        language=language,
        description=f"{name} test generator",
        binary=binary,
        operations=(
            OperationSpec(
                "init",
                "Create a site",
                args=("init",),
                params=(ParamSpec("path", required=True, positional=True),),
            ),
            OperationSpec(
                "build",
                "Build the site",
                args=("build",),
                kind="build",
                params=(
                    ParamSpec("path", cwd=True),
                    ParamSpec("output", flag="--output-dir"),
                    ParamSpec("drafts", type="boolean", flag="--drafts"),
                ),
            ),
            OperationSpec(
                "serve",
                "Serve the site",
                args=("serve",),
                kind="serve",
                params=(ParamSpec("port", type="integer", default=1111, flag="--port"),),
            ),
        ),
    )


@pytest.fixture
def demo_spec() -> AdapterSpec:
    return make_spec()


@pytest.fixture
def demo_adapter(demo_spec: AdapterSpec, fake_runner: FakeRunner) -> Adapter:
    return Adapter(demo_spec, runner=fake_runner)


@pytest.fixture
def python_spec() -> AdapterSpec:
    """Adapter spec backed by the running Python interpreter."""
    return AdapterSpec(
        name="pyssg",
        display_name="PySSG",
        language="Python",
        description="Python-backed test generator",
        binary=PYTHON,
        operations=(
            OperationSpec(
                "init",
                "Print the target directory",
                args=("-c", "import sys; print(sys.argv[1])"),
                params=(ParamSpec("path", required=True, positional=True),),
            ),
            OperationSpec(
                "build",
                "Print the working directory",
                args=("-c", "import os; print(os.getcwd())"),
                kind="build",
                params=(ParamSpec("path", cwd=True),),
            ),
            OperationSpec(
                "fail",
                "Exit non-zero",
                args=("-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"),
            ),
        ),
    )


# =============================================================================
# Binaries
# =============================================================================


def requires_binary(binary: str) -> pytest.MarkDecorator:
    """Skip unless ``binary`` is on PATH."""
    return pytest.mark.skipif(shutil.which(binary) is None, reason=f"{binary} not installed")
