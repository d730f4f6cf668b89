"""Member mappers."""
from .base import MemberMapper, PassthroughMemberMapper
from .factory import MemberMapperFactory, create_mapper_factory
from .generic import DEFAULT_MAPPING, GenericMemberMapper

__all__ = [
    "DEFAULT_MAPPING",
    "GenericMemberMapper",
    "MemberMapper",
    "MemberMapperFactory",
    "PassthroughMemberMapper",
    "create_mapper_factory",
]
