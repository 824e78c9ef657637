"""IRC line parsing used by the notification bridge."""

from .parser import IRCMessage, PrivMsg, build_privmsg, parse_irc_message

__all__ = ["IRCMessage", "PrivMsg", "build_privmsg", "parse_irc_message"]
