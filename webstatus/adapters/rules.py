from webstatus.rules.models import Rules


class RulesAdapter:
    """Exposes a loaded Rules model through the component rules ports."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    # RedirectRulesPort

    def get_allowed_schemes(self) -> list[str]:
        return list(self._rules.redirects.allowed_schemes)

    # DelayRulesPort

    def is_random_delay_enabled(self) -> bool:
        return self._rules.status.random_delay.enabled

    def get_random_delay_unit_ms(self) -> float:
        return self._rules.status.random_delay.unit_ms
