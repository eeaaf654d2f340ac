"""Role catalog domain service."""

from collections.abc import Sequence

import logfire

from access.domain.model import Application, RawRole, Role, RoleGrouping, User
from access.domain.port import LocalizationProvider
from access.domain.value import Authority, RoleId

from .authority_resolver import AuthorityResolver
from .base import Service

# Icon shown for roles that span more than one application
MULTIPLE_ROLES_ICON = "multi-role"


def _localized(application: Application, attribute: str, locale: str) -> str | None:
    return application.get(f"{attribute}:{locale}") or application.get(
        f"{attribute}:en"
    )


class RoleCatalog(Service):
    """Builds the flat list of roles an invitation can grant.

    Catalog roles and roles wrapped in the user's grants are normalized
    into one ``Role`` shape here; nothing downstream looks at provenance.
    """

    def __init__(
        self,
        authority_resolver: AuthorityResolver,
        localization: LocalizationProvider,
        locale: str = "en",
    ) -> None:
        """Initialize role catalog.

        Args:
            authority_resolver: Resolver used to check the user's rank
            localization: Lookup for the "multiple applications" label
            locale: Locale of the localized application attributes
        """
        self.authority_resolver = authority_resolver
        self.localization = localization
        self.locale = locale

    def load_roles(
        self, user: User, raw_groupings: Sequence[RoleGrouping]
    ) -> list[Role]:
        """Normalize the roles the user may invite for.

        Users below MANAGER get an empty catalog. Otherwise the catalog
        roles come first, followed by the user's own non-guest grants on
        roles the catalog does not contain.

        Args:
            user: The inviting user
            raw_groupings: Catalog roles with their applications

        Returns:
            Normalized roles, unique by identifier
        """
        with logfire.span(
            "role_catalog.load_roles",
            user_id=str(user.id),
            grouping_count=len(raw_groupings),
        ):
            if not self.authority_resolver.is_user_allowed(Authority.MANAGER, user):
                logfire.info(
                    "User below manager, empty role catalog", user_id=str(user.id)
                )
                return []

            grants = {
                user_role.role.id: user_role
                for user_role in user.user_roles
                if user_role.authority > Authority.GUEST
            }

            roles: dict[RoleId, Role] = {}
            for grouping in raw_groupings:
                if grouping.role.id in roles:
                    continue
                grant = grants.get(grouping.role.id)
                roles[grouping.role.id] = self._normalize(
                    grouping.role,
                    grouping.applications,
                    grant.authority if grant else None,
                )

            for role_id, grant in grants.items():
                if role_id not in roles:
                    roles[role_id] = self._normalize(
                        grant.role, grant.applications, grant.authority
                    )

            logfire.info(
                "Role catalog loaded",
                user_id=str(user.id),
                role_count=len(roles),
            )
            return list(roles.values())

    def resolve_initial_role(
        self, roles: Sequence[Role], hint_id: RoleId | None
    ) -> Role | None:
        """Pick the role to preselect when the form opens.

        Args:
            roles: The loaded catalog
            hint_id: Role named by the navigation hint, if any

        Returns:
            The hinted role, else the only role of a one-role catalog,
            else None
        """
        if hint_id is not None:
            for role in roles:
                if role.id == hint_id:
                    return role
        if len(roles) == 1:
            return roles[0]
        return None

    def _normalize(
        self,
        raw: RawRole,
        applications: Sequence[Application],
        grant_authority: Authority | None,
    ) -> Role:
        return Role(
            id=raw.id,
            name=raw.name,
            description=raw.description,
            default_expiry_days=raw.default_expiry_days,
            enforce_email_equality=raw.enforce_email_equality,
            edu_id_only=raw.edu_id_only,
            override_settings_allowed=raw.override_settings_allowed,
            grant_authority=grant_authority,
            **self._application_attributes(applications or raw.application_maps),
        )

    def _application_attributes(
        self, applications: Sequence[Application]
    ) -> dict[str, str | None]:
        if not applications:
            return {}
        if len(applications) == 1:
            application = applications[0]
            return {
                "application_name": _localized(application, "name", self.locale),
                "application_organization_name": _localized(
                    application, "OrganizationName", self.locale
                ),
                "logo": application.get("logo"),
            }
        organization_names = [
            _localized(application, "OrganizationName", self.locale)
            for application in applications
        ]
        return {
            "application_name": self.localization.translate("roles.multiple"),
            "application_organization_name": ", ".join(
                name for name in organization_names if name
            ),
            "logo": MULTIPLE_ROLES_ICON,
        }
