# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Cluster name canonicalization for canary subscriptions.

Cluster labels are entered by humans, so "East Coast", "east coast" and
"east-coast" all name the same cluster and must map to the same canary
subscription.
"""


def canonicalize_cluster(cluster: str) -> str:
    """Lower-case ``cluster`` and replace each space with a hyphen.

    Idempotent: canonicalizing a canonical name returns it unchanged.

    Example:
        >>> canonicalize_cluster("QA Cluster")
        'qa-cluster'
        >>> canonicalize_cluster("qa-cluster")
        'qa-cluster'
    """
    return cluster.lower().replace(" ", "-")


__all__ = ["canonicalize_cluster"]
