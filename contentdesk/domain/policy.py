from typing import Any

from contentdesk.domain.entities import ContentItem, User
from contentdesk.rules.models import Rules


class PolicyEngine:
    def __init__(self, rules: Rules):
        self.rules = rules

    def check_permission(
        self,
        user: User | None,
        action: str,
        resource: ContentItem | None = None,
    ) -> bool:
        """
        Check if the user is allowed to perform the action on the resource.

        Order of precedence:
        1. Role-Based Access Control (RBAC)
        2. Attribute-Based Access Control (ABAC)
        """
        if not user:
            return False

        # 1. RBAC
        allowed_actions = self.rules.rbac.roles.get(user.role.value, [])
        if "*" in allowed_actions or action in allowed_actions:
            return True

        # Scoped wildcards ("content:*" matches "content:approve")
        if ":" in action:
            scope = action.split(":")[0]
            if f"{scope}:*" in allowed_actions:
                return True

        # 2. ABAC, only relevant with a resource to check against
        if resource is not None:
            for rule in self.rules.abac.content_rules:
                if action in rule.allow and self._evaluate_rule(rule.if_condition, user, resource):
                    return True

        return False

    def _evaluate_rule(
        self,
        condition: dict[str, Any],
        user: User,
        resource: ContentItem,
    ) -> bool:
        """
        Evaluate condition predicates from rules.yaml.
        Supported predicates:
        - role_in: list[str]
        - owns_content: bool
        - status_in: list[str]
        """
        for predicate, args in condition.items():
            if predicate == "role_in":
                if user.role.value not in args:
                    return False

            elif predicate == "owns_content":
                owns = resource.author_id is not None and resource.author_id == user.id
                if bool(args) != owns:
                    return False

            elif predicate == "status_in":
                if resource.status.value not in args:
                    return False

            else:
                # Unknown predicates never grant access
                return False

        return True
