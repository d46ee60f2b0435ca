# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Whisper template rendering."""

from __future__ import annotations

import re
from collections.abc import Mapping

from tradewhisper.constants import TEMPLATE_TOKEN_PREFIX

_TOKEN_RE = re.compile(re.escape(TEMPLATE_TOKEN_PREFIX) + r"(\w+)")


def render_template(template: str, context: Mapping[str, str]) -> str:
    """Replace every ``@<key>`` token with the matching context value.

    Substitution is a single pass over the template, so values containing
    ``@`` tokens are inserted verbatim. Tokens without a context entry are kept.
    """
    return _TOKEN_RE.sub(lambda match: context.get(match[1], match[0]), template)
