"""Notion code-block language resolution.

The Notion API only accepts a fixed set of ``code.language`` values.  Fence
info strings in Markdown are free-form (``ts``, ``Python3``, ``shell-session``),
so :func:`parse_code_language` maps them onto that set, falling back to
``"plain text"``.
"""

from __future__ import annotations

import re

PLAIN_TEXT = "plain text"

NOTION_LANGUAGES: frozenset[str] = frozenset({
    "abap", "arduino", "bash", "basic", "c", "clojure", "coffeescript",
    "c++", "c#", "css", "dart", "diff", "docker", "elixir", "elm",
    "erlang", "flow", "fortran", "f#", "gherkin", "glsl", "go", "graphql",
    "groovy", "haskell", "html", "java", "javascript", "json", "julia",
    "kotlin", "latex", "less", "lisp", "livescript", "lua", "makefile",
    "markdown", "markup", "matlab", "mermaid", "nix", "objective-c",
    "ocaml", "pascal", "perl", "php", "plain text", "powershell",
    "prolog", "protobuf", "python", "r", "reason", "ruby", "rust",
    "sass", "scala", "scheme", "scss", "shell", "sql", "swift",
    "typescript", "vb.net", "verilog", "vhdl", "visual basic",
    "webassembly", "xml", "yaml", "java/c/c++/c#",
})

# Common syntax-highlighter aliases (linguist / highlight.js names).
LANGUAGE_ALIASES: dict[str, str] = {
    # C family
    "h": "c",
    "cc": "c++",
    "cpp": "c++",
    "cxx": "c++",
    "hpp": "c++",
    "ino": "arduino",
    "cs": "c#",
    "csharp": "c#",
    "c-sharp": "c#",
    "objc": "objective-c",
    "obj-c": "objective-c",
    "objective_c": "objective-c",
    "objectivec": "objective-c",
    # JavaScript / TypeScript
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "node": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "mts": "typescript",
    "cts": "typescript",
    "coffee": "coffeescript",
    "ls": "livescript",
    "re": "reason",
    # Scripting
    "py": "python",
    "gyp": "python",
    "rb": "ruby",
    "rake": "ruby",
    "pl": "perl",
    "pm": "perl",
    "sh": "shell",
    "zsh": "shell",
    "ksh": "shell",
    "fish": "shell",
    "console": "shell",
    "shell-session": "shell",
    "shellsession": "shell",
    "ps1": "powershell",
    "psm1": "powershell",
    "pwsh": "powershell",
    "posh": "powershell",
    # JVM / functional
    "kt": "kotlin",
    "kts": "kotlin",
    "gradle": "groovy",
    "clj": "clojure",
    "cljs": "clojure",
    "cljc": "clojure",
    "edn": "clojure",
    "hs": "haskell",
    "erl": "erlang",
    "ex": "elixir",
    "exs": "elixir",
    "ml": "ocaml",
    "fs": "f#",
    "fsharp": "f#",
    "scm": "scheme",
    "elisp": "lisp",
    "emacs-lisp": "lisp",
    "common-lisp": "lisp",
    "golang": "go",
    "rs": "rust",
    "jl": "julia",
    "vb": "visual basic",
    "vba": "visual basic",
    "vbnet": "vb.net",
    # Markup / data
    "md": "markdown",
    "mdown": "markdown",
    "htm": "html",
    "xhtml": "html",
    "xsd": "xml",
    "xsl": "xml",
    "rss": "xml",
    "yml": "yaml",
    "jsonc": "json",
    "json5": "json",
    "geojson": "json",
    "tex": "latex",
    "proto": "protobuf",
    "gql": "graphql",
    "mmd": "mermaid",
    # Build / tooling
    "dockerfile": "docker",
    "make": "makefile",
    "mk": "makefile",
    "bsdmake": "makefile",
    "patch": "diff",
    "udiff": "diff",
    "feature": "gherkin",
    "cucumber": "gherkin",
    "vert": "glsl",
    "frag": "glsl",
    "wasm": "webassembly",
    "wat": "webassembly",
    "sv": "verilog",
    "vhd": "vhdl",
    "psql": "sql",
    "mysql": "sql",
    "postgresql": "sql",
    "plsql": "sql",
    # Plain
    "text": PLAIN_TEXT,
    "txt": PLAIN_TEXT,
    "plaintext": PLAIN_TEXT,
    "plain": PLAIN_TEXT,
}

_TRAILING_VERSION = re.compile(r"\d+$")


def parse_code_language(info: str | None) -> str:
    """Map a code fence info string to a Notion-accepted language name.

    Only the first word of *info* is considered, lower-cased.  It is looked
    up in :data:`NOTION_LANGUAGES`, then :data:`LANGUAGE_ALIASES`, then both
    again with a trailing version number removed (``python3`` -> ``python``).

    >>> parse_code_language("TS")
    'typescript'
    >>> parse_code_language(None)
    'plain text'
    """
    if not info or not info.strip():
        return PLAIN_TEXT
    lang = info.strip().split()[0].lower()
    resolved = _lookup(lang)
    if resolved is None:
        resolved = _lookup(_TRAILING_VERSION.sub("", lang))
    return resolved or PLAIN_TEXT


def _lookup(lang: str) -> str | None:
    if lang in NOTION_LANGUAGES:
        return lang
    return LANGUAGE_ALIASES.get(lang)
