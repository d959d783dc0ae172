"""Domain layer — civil time values, offsets, and conversion rules.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
Timezone rules arrive through the injected :class:`~tzctl.domain.offsets.RuleSource`.
"""
