"""Frames that carry a language code (COMM, USLT, USER)."""

from dataclasses import dataclass

from .base import Frame, FrameBody, LanguageBlock, Text


def read_language_block(body: FrameBody) -> LanguageBlock:
    encoding = body.encoding()
    return LanguageBlock(encoding, body.language())


@dataclass(frozen=True)
class CommentFrame(Frame):
    """COMM: language, short description and the comment text."""

    lang: LanguageBlock
    description: Text
    text: Text

    title = "Comment Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "CommentFrame":
        lang = read_language_block(body)
        description = body.terminated_text(lang.encoding)
        text = body.rest_text(lang.encoding)
        return CommentFrame(body.header, lang, description, text)


@dataclass(frozen=True)
class LyricsFrame(Frame):
    """USLT: unsynchronised lyrics or text transcription."""

    lang: LanguageBlock
    description: Text
    text: Text

    title = "Unsynchronised Lyrics Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "LyricsFrame":
        lang = read_language_block(body)
        description = body.terminated_text(lang.encoding)
        text = body.rest_text(lang.encoding)
        return LyricsFrame(body.header, lang, description, text)


@dataclass(frozen=True)
class TermsOfUseFrame(Frame):
    """USER: terms of use. Unlike COMM there is no description field."""

    lang: LanguageBlock
    text: Text

    title = "Terms of Use Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "TermsOfUseFrame":
        lang = read_language_block(body)
        return TermsOfUseFrame(body.header, lang, body.rest_text(lang.encoding))
