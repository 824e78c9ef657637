"""IRC message parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass

# IRCv3 message-tags value escapes
_TAG_ESCAPES = {":": ";", "s": " ", "\\": "\\", "r": "\r", "n": "\n"}
CHANNEL_PREFIXES = ("#", "&")


@dataclass
class IRCMessage:
    raw: str
    prefix: str | None
    command: str | None
    params: str
    tags: dict[str, str]


def parse_irc_message(raw_line: str) -> IRCMessage:
    tags: dict[str, str] = {}
    prefix: str | None = None
    params = ""
    command: str | None = None

    original = raw_line

    if raw_line.startswith("@"):
        if " " in raw_line:
            tags_part, raw_line = raw_line.split(" ", 1)
        else:
            tags_part, raw_line = raw_line, ""
        tags = _parse_tags(tags_part[1:])

    if raw_line.startswith(":"):
        remainder = raw_line[1:]
        if " " in remainder:
            prefix, raw_line = remainder.split(" ", 1)
        else:  # malformed; whole remainder is the prefix
            prefix = remainder
            raw_line = ""

    if " :" in raw_line:
        raw_line, params = raw_line.split(" :", 1)

    parts = raw_line.split()
    if parts:
        command = parts[0].upper()
        if len(parts) > 1:
            middle = parts[1:]
            params = " ".join(middle) + (f" {params}" if params else "")

    return IRCMessage(
        raw=original, prefix=prefix, command=command, params=params, tags=tags
    )


def _unescape_tag_value(value: str) -> str:
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:  # trailing backslash is dropped
            break
        out.append(_TAG_ESCAPES.get(nxt, nxt))
    return "".join(out)


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        if not tag:
            continue
        if "=" in tag:
            k, v = tag.split("=", 1)
        else:
            k, v = tag, ""
        tags[k] = _unescape_tag_value(v)
    return tags


@dataclass
class PrivMsg:
    author: str
    username: str | None
    host: str | None
    target: str
    message: str
    tags: dict[str, str]
    raw: str

    @property
    def is_private_message(self) -> bool:
        return not self.target.startswith(CHANNEL_PREFIXES)

    @property
    def account(self) -> str | None:
        # account-tag capability; '*' means not logged in
        account = self.tags.get("account")
        if not account or account == "*":
            return None
        return account


def build_privmsg(parsed: IRCMessage) -> PrivMsg | None:
    if parsed.command != "PRIVMSG":
        return None
    params = parsed.params.split(" ", 1)
    if len(params) < 2:
        return None
    target, message = params
    # Prefix is nick!user@host
    nick_user, _, host = (parsed.prefix or "?").partition("@")
    author, _, username = nick_user.partition("!")
    return PrivMsg(
        author=author,
        username=username or None,
        host=host or None,
        target=target,
        message=message,
        tags=parsed.tags,
        raw=parsed.raw,
    )
