"""Organizes plain-text notes in a directory tree keyed by topic.

If you installed via ``pip``, run ``nogo help`` to get help.
Or, run ``python3 -m nogo help``.

To use the Python API, look at :class:`nogo.api.Nogo`
"""
