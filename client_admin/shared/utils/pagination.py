# client_admin/shared/utils/pagination.py

from typing import Optional

from fastapi_pagination import Params

from client_admin.adapters.configuration.config import settings
from client_admin.domain.exceptions import InvalidInputException


def resolve_page_params(
        page: Optional[int],
        size: Optional[int],
        policy: Optional[str] = None,
        max_size: Optional[int] = None,
) -> Params:
    """
    Validate caller-supplied pagination and build fastapi-pagination Params.

    Pages start at 1 and sizes are bounded by ``PAGE_SIZE_MAX``. Values out
    of range are clamped into range, or rejected when the policy is "reject".

    Raises:
        InvalidInputException: If a value is out of range under the "reject" policy
    """
    policy = policy or settings.PAGINATION_POLICY
    max_size = max_size or settings.PAGE_SIZE_MAX

    if page is None:
        page = 1
    if size is None:
        size = min(settings.PAGE_SIZE_DEFAULT, max_size)

    errors = {}
    if page < 1:
        errors["page"] = "must be greater than or equal to 1"
    if size < 1 or size > max_size:
        errors["size"] = f"must be between 1 and {max_size}"

    if errors:
        if policy == "reject":
            raise InvalidInputException(detail="Invalid pagination", fields=errors)
        page = max(page, 1)
        size = min(max(size, 1), max_size)

    return Params.model_construct(page=page, size=size)
