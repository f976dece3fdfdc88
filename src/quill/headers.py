from __future__ import annotations
import re
from typing import Dict, Mapping, Optional, Tuple, Union

from .errors import InvalidArgumentError
from .models import ChatType, HeaderData

# ChatType -> (short form, long form)
_FORMS: Dict[ChatType, Tuple[str, str]] = {
    ChatType.EMOTE: ("/em", "/emote"),
    ChatType.REPLY: ("/r", "/reply"),
    ChatType.SAY: ("/s", "/say"),
    ChatType.PARTY: ("/p", "/party"),
    ChatType.FC: ("/fc", "/freecompany"),
    ChatType.SHOUT: ("/sh", "/shout"),
    ChatType.YELL: ("/y", "/yell"),
    ChatType.TELL: ("/t", "/tell"),
    ChatType.ECHO: ("/e", "/echo"),
    ChatType.LINKSHELL: ("/linkshell", "/linkshell"),
    ChatType.CROSSWORLD_LINKSHELL: ("/cwlinkshell", "/cwlinkshell"),
}

_LINKSHELLS = (ChatType.LINKSHELL, ChatType.CROSSWORLD_LINKSHELL)
_TARGET = r"(?P<target>[\w']+ [\w']+@[A-Za-z]+)"


def short_header(chat_type: ChatType) -> str:
    return _FORMS.get(chat_type, ("", ""))[0]


def long_header(chat_type: ChatType) -> str:
    return _FORMS.get(chat_type, ("", ""))[1]


def _compile(chat_type: ChatType, forms, channel: bool = True) -> re.Pattern:
    alts = "|".join(re.escape(f) for f in sorted(set(forms), key=len, reverse=True))
    pat = rf"^(?:{alts})"
    if channel and chat_type in _LINKSHELLS:
        pat += r"(?P<channel>[1-8])"
    if chat_type is ChatType.TELL:
        pat += r"[ \t]+" + _TARGET
    return re.compile(pat + r"(?:[ \n]|$)")


_PATTERNS = [(ct, _compile(ct, forms)) for ct, forms in _FORMS.items()]


def _to_data(chat_type: ChatType, m: re.Match) -> HeaderData:
    groups = m.groupdict()
    channel = groups.get("channel")
    return HeaderData(
        chat_type=chat_type,
        headstring=m.group(0),
        tell_target=groups.get("target") or "",
        linkshell=int(channel) - 1 if channel else 0,
        cross_world=chat_type is ChatType.CROSSWORLD_LINKSHELL,
    )


def _alias_type(alias: str, target: Union[str, ChatType]) -> ChatType:
    if isinstance(target, ChatType):
        return target
    try:
        return ChatType[str(target).upper()]
    except KeyError:
        raise InvalidArgumentError(f"header alias {alias!r} names unknown chat type {target!r}") from None


def parse_header(text: str, aliases: Optional[Mapping[str, Union[str, ChatType]]] = None) -> HeaderData:
    """
    Recognise a chat header at the very start of `text`.

    A header is a known short or long form ("/s", "/say", ...) followed by a
    space, a newline or the end of the text. Linkshells carry a channel
    digit ("/linkshell3"); a tell needs a "First Last@World" target or it is
    rejected. `aliases` maps extra names (without the slash) to chat types;
    an alias naming an unknown chat type raises InvalidArgumentError.
    Returns an invalid HeaderData when nothing matches.
    """
    if not text.startswith("/"):
        return HeaderData()

    for chat_type, pat in _PATTERNS:
        m = pat.match(text)
        if m:
            return _to_data(chat_type, m)

    for alias, target in (aliases or {}).items():
        chat_type = _alias_type(alias, target)
        m = _compile(chat_type, ["/" + alias.lstrip("/")], channel=False).match(text)
        if m:
            return _to_data(chat_type, m)

    return HeaderData()


def split_header(text: str, aliases: Optional[Mapping[str, Union[str, ChatType]]] = None) -> Tuple[HeaderData, str]:
    """(header, body): the body is the text after the header prefix."""
    data = parse_header(text, aliases)
    return data, text[len(data.headstring):]
