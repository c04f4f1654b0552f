from __future__ import annotations

"""
A minimal pygls-based Language Server for Schemer.

Features:
- Text synchronization and document store
- Diagnostics: reader failures, trailing input after the first expression
- Hover: primitive signatures
- Completion: primitive names

Note: We never evaluate the buffer; analysis goes through the Reader only.
"""

import logging
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from schemer import __version__
from schemer_lsp.analysis import (
    PRIMITIVE_SIGNATURES,
    BufferDiagnostic,
    collect_diagnostics,
    hover_text,
    word_at,
)

logger = logging.getLogger(__name__)

SEVERITIES = {
    "error": DiagnosticSeverity.Error,
    "information": DiagnosticSeverity.Information,
}


class SchemerLanguageServer(LanguageServer):
    CMD_NAME = "schemer-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, str] = {}


ls = SchemerLanguageServer()


def to_lsp_diagnostic(diag: BufferDiagnostic) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=diag.line, character=diag.col),
            end=Position(line=diag.line, character=diag.col + 1),
        ),
        message=diag.message,
        severity=SEVERITIES[diag.severity],
        source=SchemerLanguageServer.CMD_NAME,
    )


def _publish_diagnostics(uri: str):
    diags: List[Diagnostic] = [to_lsp_diagnostic(d) for d in collect_diagnostics(ls.documents[uri])]
    logger.debug("%s: %d diagnostic(s)", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    ls.documents[uri] = params.text_document.text or ""
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        ls.documents[uri] = params.content_changes[-1].text
    else:
        ls.documents.setdefault(uri, "")
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    text = ls.documents.get(params.text_document.uri)
    if text is None:
        return None
    contents = hover_text(word_at(text, params.position.line, params.position.character))
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in PRIMITIVE_SIGNATURES.items()
    ]
    return CompletionList(is_incomplete=False, items=items)


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
