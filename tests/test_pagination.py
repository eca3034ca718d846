"""
Unit tests for pagination parameter resolution.
"""

import pytest

from client_admin.domain.exceptions import InvalidInputException
from client_admin.shared.utils.pagination import resolve_page_params


class TestResolvePageParams:
    """Test cases for resolve_page_params."""

    def test_defaults(self):
        params = resolve_page_params(None, None, policy="clamp", max_size=100)

        assert params.page == 1
        assert params.size == 20

    def test_valid_values_pass_through(self):
        params = resolve_page_params(3, 50, policy="reject", max_size=100)

        assert (params.page, params.size) == (3, 50)

    @pytest.mark.parametrize(
        "page, size, expected",
        [
            (0, 10, (1, 10)),
            (-5, 10, (1, 10)),
            (1, 0, (1, 1)),
            (1, 1000, (1, 100)),
        ],
    )
    def test_clamp_policy(self, page, size, expected):
        params = resolve_page_params(page, size, policy="clamp", max_size=100)

        assert (params.page, params.size) == expected

    @pytest.mark.parametrize("page, size", [(0, 10), (1, 0), (1, 101)])
    def test_reject_policy(self, page, size):
        with pytest.raises(InvalidInputException) as exc_info:
            resolve_page_params(page, size, policy="reject", max_size=100)

        assert exc_info.value.internal_code == "INVALID_INPUT"
