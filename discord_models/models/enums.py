"""Closed enumerations of the Discord data model.

Each member is ``(token, ordinal)``; None marks an encoding the enum does
not have on the wire.
"""

from __future__ import annotations

from discord_models.core.enums import WireEnum


class ChannelType(WireEnum):
    """Kind of a channel."""

    GROUP = ("group", 0)
    PRIVATE = ("private", 1)
    TEXT = ("text", 2)
    VOICE = ("voice", 3)


class ConnectionType(WireEnum):
    """Third-party service of a user connection."""

    BATTLE_NET = ("battlenet", None)
    STEAM = ("steam", None)
    TWITCH = ("twitch", None)
    YOUTUBE = ("youtube", None)


class DefaultAvatar(WireEnum):
    """Default avatar, chosen by ``discriminator % 5``.

    The token is the avatar's asset hash.
    """

    BLURPLE = ("6debd47ed13483642cf09e832ed0bc1b", 0)
    GREY = ("322c936a8c8be1b803cd94861bdfa868", 1)
    GREEN = ("dd4dbc0016779df1378e7812eabaa04d", 2)
    ORANGE = ("0e291f67c9274a1abdddeb3fd919cbaa", 3)
    RED = ("1cbd08c76f8af6dddce02c5138971129", 4)


class Feature(WireEnum):
    """Special feature granted to a guild."""

    INVITE_SPLASH = ("INVITE_SPLASH", None)
    VANITY_URL = ("VANITY_URL", None)
    VIP_REGIONS = ("VIP_REGIONS", None)


class GameType(WireEnum):
    PLAYING = (None, 0)
    STREAMING = (None, 1)


class IncidentStatus(WireEnum):
    """Status of a status-page incident update."""

    IDENTIFIED = ("identified", None)
    INVESTIGATING = ("investigating", None)
    MONITORING = ("monitoring", None)
    POSTMORTEM = ("postmortem", None)
    RESOLVED = ("resolved", None)


class MessageType(WireEnum):
    """Regular messages and system messages."""

    REGULAR = (None, 0)
    GROUP_RECIPIENT_ADDITION = (None, 1)
    GROUP_RECIPIENT_REMOVAL = (None, 2)
    GROUP_CALL_CREATION = (None, 3)
    GROUP_NAME_UPDATE = (None, 4)
    GROUP_ICON_UPDATE = (None, 5)
    PINS_ADD = (None, 6)


class NotificationLevel(WireEnum):
    ALL = (None, 0)
    MENTIONS = (None, 1)
    NOTHING = (None, 2)
    PARENT = (None, 3)


class OnlineStatus(WireEnum):
    DO_NOT_DISTURB = ("dnd", None)
    IDLE = ("idle", None)
    INVISIBLE = ("invisible", None)
    OFFLINE = ("offline", None)
    ONLINE = ("online", None)


class PermissionOverwriteKind(WireEnum):
    """Whether a permission overwrite targets a member or a role."""

    MEMBER = ("member", None)
    ROLE = ("role", None)


class Region(WireEnum):
    """Voice server region of a guild or call."""

    AMSTERDAM = ("amsterdam", None)
    BRAZIL = ("brazil", None)
    EU_CENTRAL = ("eu-central", None)
    EU_WEST = ("eu-west", None)
    FRANKFURT = ("frankfurt", None)
    LONDON = ("london", None)
    SYDNEY = ("sydney", None)
    US_CENTRAL = ("us-central", None)
    US_EAST = ("us-east", None)
    US_SOUTH = ("us-south", None)
    US_WEST = ("us-west", None)
    VIP_AMSTERDAM = ("vip-amsterdam", None)
    VIP_US_EAST = ("vip-us-east", None)
    VIP_US_WEST = ("vip-us-west", None)


class RelationshipType(WireEnum):
    BLOCKED = (None, 0)
    FRIENDS = (None, 1)
    INCOMING_REQUEST = (None, 2)
    IGNORED = (None, 3)
    OUTGOING_REQUEST = (None, 4)


class VerificationLevel(WireEnum):
    """Criteria a user must meet before sending messages in a guild."""

    HIGH = (None, 0)
    LOW = (None, 1)
    MEDIUM = (None, 2)
    NONE = (None, 3)


ALL_ENUMS: tuple[type[WireEnum], ...] = (
    ChannelType,
    ConnectionType,
    DefaultAvatar,
    Feature,
    GameType,
    IncidentStatus,
    MessageType,
    NotificationLevel,
    OnlineStatus,
    PermissionOverwriteKind,
    Region,
    RelationshipType,
    VerificationLevel,
)
