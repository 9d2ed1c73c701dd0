"""Core services: the removal wait, the generic wait, and their errors.

The waits themselves are imported from their modules
(``domwait.core.wait_for_removal``, ``domwait.core.wait_for``) or from the
top-level ``domwait`` package; this package init stays import-light because
the config layer imports ``domwait.core.models`` while it loads.
"""
