"""Consistency checks for icon aliases across a metadata collection."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..io.models import AliasIssue


def validate_aliases(all_metadata: Mapping[str, Mapping[str, Any]]) -> List[AliasIssue]:
    """Return every alias problem found in *all_metadata* (``name -> metadata``).

    An alias must not name its own icon, must appear once per icon, must not
    shadow an existing icon and must not be claimed by two icons.
    """
    issues: List[AliasIssue] = []
    owners: Dict[str, str] = {}

    for icon in sorted(all_metadata):
        aliases = all_metadata[icon].get("aliases")
        if aliases is None:
            continue
        if not isinstance(aliases, list):
            issues.append(AliasIssue(icon=icon, alias=str(aliases), reason="not a list"))
            continue

        seen: set[str] = set()
        for alias in aliases:
            if not isinstance(alias, str):
                issues.append(AliasIssue(icon=icon, alias=repr(alias), reason="not a string"))
                continue
            if alias == icon:
                issues.append(AliasIssue(icon=icon, alias=alias, reason="self reference"))
                continue
            if alias in seen:
                issues.append(AliasIssue(icon=icon, alias=alias, reason="duplicate"))
                continue
            seen.add(alias)
            if alias in all_metadata:
                issues.append(AliasIssue(icon=icon, alias=alias, reason="shadows an icon"))
            owner = owners.setdefault(alias, icon)
            if owner != icon:
                issues.append(
                    AliasIssue(icon=icon, alias=alias, reason=f"also an alias of {owner}")
                )

    return issues
