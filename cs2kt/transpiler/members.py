"""Classification of members that implement interface members.

Kotlin requires `override` on a member implementing an interface member, so
the walker asks this classifier before emitting a method or property.
"""

from loguru import logger

from cs2kt.transpiler.core.interfaces import SymbolResolver
from cs2kt.transpiler.models import MemberKind, MemberSymbol


class MemberClassifier:
    """Answers read-only questions about a member's interface relationships."""

    def __init__(self, resolver: SymbolResolver):
        self.resolver = resolver

    def is_interface_implementation(self, member: MemberSymbol) -> bool:
        """Check whether `member` implements some interface member of its type.

        Methods are matched against interface methods only and properties
        against interface properties only.

        Args:
            member: Declared method or property

        Returns:
            True if the containing type resolves some interface member to it
        """
        containing_type = member.containing_type
        for interface_member in self.resolver.interface_members_of(containing_type):
            if interface_member.kind is not member.kind:
                continue
            implementation = self.resolver.implementation_of(
                interface_member, containing_type
            )
            if implementation == member:
                logger.debug(
                    f"{containing_type}.{member.name} implements "
                    f"{interface_member.containing_type}.{interface_member.name}"
                )
                return True
        return False

    def is_interface_method(self, member: MemberSymbol) -> bool:
        return member.kind is MemberKind.METHOD and self.is_interface_implementation(
            member
        )

    def is_interface_property(self, member: MemberSymbol) -> bool:
        return (
            member.kind is MemberKind.PROPERTY
            and self.is_interface_implementation(member)
        )
