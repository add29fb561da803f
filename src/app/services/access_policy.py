"""
Access Control Policy

Ownership is the only authorization criterion: a user may update or delete
a resource (account, post, comment) only if they own it. Reads are public.
There are no roles and no admin override.
"""

from typing import Union
from uuid import UUID

from libs.result import Error, Result, Return

OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"

Identity = Union[str, UUID]


def authorize_owner_action(
    authenticated_identity: Identity, resource_owner_identity: Identity
) -> Result[None]:
    """
    Decide whether the caller may mutate a resource.

    Args:
        authenticated_identity: User ID proven by a verified token
        resource_owner_identity: User ID that owns the target resource

    Returns:
        Ok (allow) iff both identities are equal, else Error(OWNERSHIP_MISMATCH)
    """
    if (
        authenticated_identity is not None
        and resource_owner_identity is not None
        and str(authenticated_identity) == str(resource_owner_identity)
    ):
        return Return.ok()
    return Return.err(
        Error(OWNERSHIP_MISMATCH, "You are not allowed to modify this resource")
    )
