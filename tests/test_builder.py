"""Tests for operation specs and argument building."""

import pytest

from qed_ssg import InvalidInputError
from qed_ssg.tools import ArgumentBuilder, Invocation, OperationSpec, ParamSpec

BUILD = OperationSpec(
    "build",
    "Build the site",
    args=("build",),
    kind="build",
    params=(
        ParamSpec("path", cwd=True),
        ParamSpec("output", flag="--output-dir"),
        ParamSpec("drafts", type="boolean", flag="--drafts"),
        ParamSpec("ignore", type="array", flag="--ignore"),
        ParamSpec("name", flag="--name="),
        ParamSpec("files", type="array", positional=True),
        ParamSpec("target", positional=True),
    ),
)


def build(args: dict, operation: OperationSpec = BUILD) -> Invocation:
    return ArgumentBuilder("demo_build", operation).build(args)


class TestArgumentBuilder:
    def test_fixed_args_only(self) -> None:
        assert build({}) == Invocation(args=("build",), cwd=None)

    def test_cwd_binding(self) -> None:
        invocation = build({"path": "/srv/site"})
        assert invocation.cwd == "/srv/site"
        assert "/srv/site" not in invocation.args

    def test_option_with_value(self) -> None:
        assert build({"output": "public"}).args == ("build", "--output-dir", "public")

    def test_boolean_true_and_false(self) -> None:
        assert build({"drafts": True}).args == ("build", "--drafts")
        assert build({"drafts": False}).args == ("build",)

    def test_array_flag_repeated(self) -> None:
        assert build({"ignore": ["a", "b"]}).args == ("build", "--ignore", "a", "--ignore", "b")

    def test_joined_flag(self) -> None:
        assert build({"name": "blog"}).args == ("build", "--name=blog")

    def test_positionals_last(self) -> None:
        invocation = build({"target": "t", "files": ["x", "y"], "drafts": True, "output": "o"})
        assert invocation.args == ("build", "--output-dir", "o", "--drafts", "x", "y", "t")

    def test_value_with_spaces_is_one_token(self) -> None:
        invocation = build({"output": "my site; rm -rf /"})
        assert invocation.args[-1] == "my site; rm -rf /"

    def test_integer_stringified(self) -> None:
        operation = OperationSpec(
            "serve", "Serve", args=("serve",), params=(ParamSpec("port", type="integer", flag="--port"),)
        )
        assert build({"port": 1111}, operation).args == ("serve", "--port", "1111")

    def test_option_value_may_start_with_dash(self) -> None:
        assert build({"output": "-public"}).args == ("build", "--output-dir", "-public")

    def test_positional_starting_with_dash_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="must not start with '-'"):
            build({"target": "--help"})

    def test_array_positional_starting_with_dash_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            build({"files": ["ok", "-rf"]})


class TestOperationSpecProblems:
    def test_valid(self) -> None:
        assert BUILD.problems() == []

    def test_unknown_kind(self) -> None:
        assert OperationSpec("build", "", kind="deploy").problems()

    def test_unbound_param(self) -> None:
        problems = OperationSpec("build", "", params=(ParamSpec("path"),)).problems()
        assert any("exactly one of flag, positional, cwd" in p for p in problems)

    def test_double_bound_param(self) -> None:
        problems = OperationSpec(
            "build", "", params=(ParamSpec("path", flag="--path", positional=True),)
        ).problems()
        assert problems

    def test_duplicate_param(self) -> None:
        problems = OperationSpec(
            "build", "", params=(ParamSpec("a", flag="-a"), ParamSpec("a", flag="-b"))
        ).problems()
        assert any("declared twice" in p for p in problems)

    def test_unknown_type(self) -> None:
        problems = OperationSpec("build", "", params=(ParamSpec("a", type="dict", flag="-a"),)).problems()
        assert any("unknown type" in p for p in problems)

    def test_boolean_needs_flag(self) -> None:
        problems = OperationSpec(
            "build", "", params=(ParamSpec("a", type="boolean", positional=True),)
        ).problems()
        assert any("boolean" in p for p in problems)

    def test_two_cwd_params(self) -> None:
        problems = OperationSpec(
            "build", "", params=(ParamSpec("a", cwd=True), ParamSpec("b", cwd=True))
        ).problems()
        assert any("more than one working directory" in p for p in problems)

    def test_cwd_must_be_string(self) -> None:
        problems = OperationSpec("build", "", params=(ParamSpec("a", type="integer", cwd=True),)).problems()
        assert any("must be a string" in p for p in problems)


class TestParamSpec:
    def test_to_parameter(self) -> None:
        param = ParamSpec("port", type="integer", description="Port", default=1111, flag="--port")
        tool_param = param.to_parameter()
        assert tool_param.name == "port"
        assert tool_param.type == "integer"
        assert tool_param.default == 1111
        assert tool_param.required is False
