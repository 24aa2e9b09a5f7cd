"""ArgumentResolver tests — resolver ordering, deferral and failures."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from fastapi_header_binding.core.exceptions import (
    ArgumentResolutionError,
    MissingHeaderError,
)
from fastapi_header_binding.core.types import ValueResolver
from fastapi_header_binding.http.request import HeaderRequest
from fastapi_header_binding.resolution.base import BaseValueResolver
from fastapi_header_binding.resolution.header import RequestHeaderValueResolver
from fastapi_header_binding.resolution.pipeline import ArgumentResolver


class DefaultValueResolver(BaseValueResolver):
    """Supplies the declared default for any parameter that has one."""

    def resolve(self, request, parameter):
        if parameter.has_default_value:
            return [parameter.default_value]
        return []


class TestDefaults:

    def test_default_pipeline_uses_header_resolver(self):
        pipeline = ArgumentResolver()
        assert len(pipeline.resolvers) == 1
        assert isinstance(pipeline.resolvers[0], RequestHeaderValueResolver)

    def test_resolvers_satisfy_protocol(self):
        assert isinstance(RequestHeaderValueResolver(), ValueResolver)


class TestGetArgument:

    def test_header_value(self, make_parameter):
        pipeline = ArgumentResolver()
        parameter = make_parameter("user_agent", header="user-agent")
        assert pipeline.get_argument({"User-Agent": "curl"}, parameter) == "curl"

    def test_nullable_none_counts_as_resolved(self, make_parameter):
        pipeline = ArgumentResolver()
        parameter = make_parameter("x-trace", is_nullable=True)
        assert pipeline.get_argument({}, parameter) is None

    def test_falls_through_to_next_resolver(self, make_parameter):
        pipeline = ArgumentResolver([RequestHeaderValueResolver(), DefaultValueResolver()])
        parameter = make_parameter(
            "page_size", bound=False, has_default_value=True, default_value=20
        )
        assert pipeline.get_argument({}, parameter) == 20

    def test_first_resolver_wins(self, make_parameter):
        pipeline = ArgumentResolver([RequestHeaderValueResolver(), DefaultValueResolver()])
        parameter = make_parameter(
            "x-mode", has_default_value=True, default_value="default"
        )
        assert pipeline.get_argument({"x-mode": "live"}, parameter) == "live"

    def test_unresolved_parameter_raises(self, make_parameter):
        pipeline = ArgumentResolver()
        parameter = make_parameter("session", bound=False)
        with pytest.raises(ArgumentResolutionError, match="session") as exc_info:
            pipeline.get_argument({}, parameter)
        assert isinstance(exc_info.value, RuntimeError)
        assert exc_info.value.details["resolvers"] == ["RequestHeaderValueResolver"]

    def test_too_many_values_raises(self, make_parameter):
        greedy = MagicMock()
        greedy.resolve.return_value = ["a", "b"]
        pipeline = ArgumentResolver([greedy])
        with pytest.raises(ArgumentResolutionError, match="at most one value"):
            pipeline.get_argument({}, make_parameter())

    def test_missing_header_propagates(self, make_parameter):
        pipeline = ArgumentResolver([RequestHeaderValueResolver(), DefaultValueResolver()])
        with pytest.raises(MissingHeaderError):
            pipeline.get_argument({}, make_parameter("x-required"))

    def test_resolvers_receive_wrapped_request(self, make_parameter):
        spy = MagicMock()
        spy.resolve.return_value = ["v"]
        ArgumentResolver([spy]).get_argument({"a": "b"}, make_parameter())
        request_arg = spy.resolve.call_args.args[0]
        assert isinstance(request_arg, HeaderRequest)


class TestGetArguments:

    def test_maps_parameters_by_name(self, make_parameter):
        pipeline = ArgumentResolver()
        parameters = [
            make_parameter("accept", "array"),
            make_parameter("version", header="X-Api-Version"),
            make_parameter("trace", is_nullable=True),
        ]
        request = {"Accept": "text/html;q=0.5,application/json", "X-Api-Version": "3"}
        assert pipeline.get_arguments(request, parameters) == {
            "accept": ["application/json", "text/html"],
            "version": "3",
            "trace": None,
        }
