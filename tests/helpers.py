from __future__ import annotations


def li(base: str | None, reading: str | None = None) -> str:
    parts = []
    if reading is not None:
        parts.append(f'<span class="furigana">{reading}</span>')
    if base is not None:
        parts.append(f'<span class="unlinked">{base}</span>')
    return f'<li class="clearfix">{"".join(parts)}</li>'


def sentence_block(tokens: str | None, english: str | None) -> str:
    inner = ""
    if tokens is not None:
        inner += f'<ul class="japanese_sentence japanese japanese_gothic clearfix">{tokens}</ul>'
    if english is not None:
        inner += (
            '<div class="english_sentence clearfix">'
            f'<span class="english">{english}</span>\n'
            '<span class="inline_copyright">— <a href="#">Tatoeba</a></span>'
            "</div>"
        )
    return f'<div class="sentence_content">{inner}</div>'


def sentences_page(*blocks: str) -> str:
    return (
        "<html><body><div id=\"main_results\">"
        + "".join(f'<li class="sentence">{block}</li>' for block in blocks)
        + "</div></body></html>"
    )
