"""Discord permission utilities.

Calculates a member's permissions in a guild or channel from decoded
roles and permission overwrites.
"""

from __future__ import annotations

from typing import Iterable

from discord_models.models import (
    ChannelType,
    Guild,
    GuildChannel,
    Member,
    PermissionOverwrite,
    PermissionOverwriteKind,
    Role,
    RoleId,
    UserId,
)


# Permission bit flags
# See: https://discord.com/developers/docs/topics/permissions#permissions-bitwise-permission-flags
ADMINISTRATOR = 0x0000000000000008  # 1 << 3
VIEW_CHANNEL = 0x0000000000000400  # 1 << 10
SEND_MESSAGES = 0x0000000000000800  # 1 << 11
READ_MESSAGE_HISTORY = 0x0000000000010000  # 1 << 16
CONNECT = 0x0000000000100000  # 1 << 20 (voice channel connect)

ALL_PERMISSIONS = 0xFFFFFFFFFFFFFFFF


def build_role_permissions_map(roles: Iterable[Role]) -> dict[RoleId, int]:
    """Build a mapping of role_id -> permissions from decoded roles.

    Args:
        roles: Role records, e.g. ``guild.roles.values()``

    Returns:
        Dict mapping role id to permission bits
    """
    return {role.id: role.permissions for role in roles}


def compute_base_permissions(
    user_roles: list[RoleId],
    guild_roles: dict[RoleId, int],
    everyone_role_id: RoleId,
) -> int:
    """Compute base guild-level permissions for a member.

    Args:
        user_roles: Role ids the member has
        guild_roles: Mapping of role id -> permission bits
        everyone_role_id: The guild's @everyone role id (same as guild id)

    Returns:
        Combined permission bits from all roles
    """
    permissions = guild_roles.get(everyone_role_id, 0)

    for role_id in user_roles:
        permissions |= guild_roles.get(role_id, 0)

    if permissions & ADMINISTRATOR:
        return ALL_PERMISSIONS

    return permissions


def compute_channel_permissions(
    user_id: UserId,
    base_permissions: int,
    channel_overwrites: list[PermissionOverwrite],
    user_roles: list[RoleId],
    everyone_role_id: RoleId,
) -> int:
    """Compute final channel-level permissions for a member.

    Applies channel permission overwrites in order:
    1. @everyone deny -> @everyone allow
    2. Role deny (combined) -> Role allow (combined)
    3. Member deny -> Member allow

    Args:
        user_id: The member's user id
        base_permissions: Pre-computed base permissions from roles
        channel_overwrites: Decoded overwrites of the channel
        user_roles: Role ids the member has
        everyone_role_id: The guild's @everyone role id

    Returns:
        Final permission bits for the channel
    """
    if base_permissions & ADMINISTRATOR:
        return ALL_PERMISSIONS

    permissions = base_permissions

    role_allow = 0
    role_deny = 0
    member_overwrite: PermissionOverwrite | None = None

    for overwrite in channel_overwrites:
        if overwrite.kind is PermissionOverwriteKind.ROLE:
            if overwrite.id == everyone_role_id:
                permissions &= ~overwrite.deny
                permissions |= overwrite.allow
            elif overwrite.id in user_roles:
                role_deny |= overwrite.deny
                role_allow |= overwrite.allow
        elif overwrite.id == user_id:
            member_overwrite = overwrite

    permissions &= ~role_deny
    permissions |= role_allow

    if member_overwrite is not None:
        permissions &= ~member_overwrite.deny
        permissions |= member_overwrite.allow

    return permissions


def member_permissions(
    guild: Guild, member: Member, channel: GuildChannel | None = None
) -> int:
    """Compute a member's permissions in a guild, or in one of its channels.

    The guild owner always has every permission.
    """
    if member.user.id == guild.owner_id:
        return ALL_PERMISSIONS

    everyone_role_id = guild.everyone_role_id
    base = compute_base_permissions(
        member.roles,
        build_role_permissions_map(guild.roles.values()),
        everyone_role_id,
    )
    if channel is None:
        return base

    return compute_channel_permissions(
        user_id=member.user.id,
        base_permissions=base,
        channel_overwrites=channel.permission_overwrites,
        user_roles=member.roles,
        everyone_role_id=everyone_role_id,
    )


def can_view_channel(permissions: int) -> bool:
    """Check if permissions include VIEW_CHANNEL."""
    return bool(permissions & VIEW_CHANNEL)


def can_connect_voice(permissions: int) -> bool:
    """Check if permissions include CONNECT (for voice channels)."""
    return bool(permissions & CONNECT)


def can_send_messages(permissions: int) -> bool:
    return bool(permissions & SEND_MESSAGES)


def can_read_history(permissions: int) -> bool:
    """Check if permissions include READ_MESSAGE_HISTORY."""
    return bool(permissions & READ_MESSAGE_HISTORY)


def can_access_channel(permissions: int, channel_type: ChannelType) -> bool:
    """Check if a member can access a channel.

    Voice channels require CONNECT in addition to VIEW_CHANNEL.

    Args:
        permissions: Computed channel permissions
        channel_type: Kind of the channel

    Returns:
        True if the member can access the channel
    """
    if not can_view_channel(permissions):
        return False

    if channel_type is ChannelType.VOICE:
        return can_connect_voice(permissions)

    return True
