"""Outcome categories and the slug/phrase alias table.

The API spells every outcome category two ways depending on the endpoint:
a kebab-case slug (``"no-further-action"``) inside ``{code, name}`` objects,
and the human phrase (``"Investigation complete; no suspect identified"``)
in a crime's ``outcome_status``. Both decode to the same member.
"""

from enum import Enum

from police_api.exceptions import UnknownCategory


class OutcomeCategory(Enum):
    """Closed set of crime outcome categories, valued by slug."""

    ACTION_TAKEN_BY_ANOTHER_ORGANISATION = "action-taken-by-another-organisation"
    ABSOLUTE_DISCHARGE = "absolute-discharge"
    AWAITING_COURT_RESULT = "awaiting-court-result"
    CAUTIONED = "cautioned"
    CHARGED = "charged"
    COMMUNITY_PENALTY = "community-penalty"
    COMPENSATION = "compensation"
    CONDITIONAL_DISCHARGE = "conditional-discharge"
    COURT_RESULT_UNAVAILABLE = "court-result-unavailable"
    DEPRIVED_OF_PROPERTY = "deprived-of-property"
    DRUGS_POSSESSION_WARNING = "drugs-possession-warning"
    FINED = "fined"
    FORMAL_ACTION_NOT_IN_PUBLIC_INTEREST = "formal-action-not-in-public-interest"
    FURTHER_ACTION_NOT_IN_PUBLIC_INTEREST = "further-action-not-in-public-interest"
    FURTHER_INVESTIGATION_NOT_IN_PUBLIC_INTEREST = (
        "further-investigation-not-in-public-interest"
    )
    IMPRISONED = "imprisoned"
    LOCAL_RESOLUTION = "local-resolution"
    NO_FURTHER_ACTION = "no-further-action"
    NOT_GUILTY = "not-guilty"
    OTHER_COURT_DISPOSAL = "other-court-disposal"
    PENALTY_NOTICE_ISSUED = "penalty-notice-issued"
    SENT_TO_CROWN_COURT = "sent-to-crown-court"
    SENTENCED_IN_ANOTHER_CASE = "sentenced-in-another-case"
    STATUS_UPDATE_UNAVAILABLE = "status-update-unavailable"
    SUSPENDED_SENTENCE = "suspended-sentence"
    UNABLE_TO_PROCEED = "unable-to-proceed"
    UNABLE_TO_PROSECUTE = "unable-to-prosecute"
    UNDER_INVESTIGATION = "under-investigation"

    @property
    def slug(self) -> str:
        return self.value

    @property
    def phrase(self) -> str:
        return _PHRASES[self]

    def encode(self) -> str:
        """Wire spelling used when sending a category back to the API."""
        return self.slug


_PHRASES: dict[OutcomeCategory, str] = {
    OutcomeCategory.ACTION_TAKEN_BY_ANOTHER_ORGANISATION: "Action to be taken by another organisation",
    OutcomeCategory.ABSOLUTE_DISCHARGE: "Offender given absolute discharge",
    OutcomeCategory.AWAITING_COURT_RESULT: "Awaiting court outcome",
    OutcomeCategory.CAUTIONED: "Offender given a caution",
    OutcomeCategory.CHARGED: "Suspect charged",
    OutcomeCategory.COMMUNITY_PENALTY: "Offender given community sentence",
    OutcomeCategory.COMPENSATION: "Offender ordered to pay compensation",
    OutcomeCategory.CONDITIONAL_DISCHARGE: "Offender given conditional discharge",
    OutcomeCategory.COURT_RESULT_UNAVAILABLE: "Court result unavailable",
    OutcomeCategory.DEPRIVED_OF_PROPERTY: "Offender deprived of property",
    OutcomeCategory.DRUGS_POSSESSION_WARNING: "Offender given a drugs possession warning",
    OutcomeCategory.FINED: "Offender fined",
    OutcomeCategory.FORMAL_ACTION_NOT_IN_PUBLIC_INTEREST: "Formal action is not in the public interest",
    OutcomeCategory.FURTHER_ACTION_NOT_IN_PUBLIC_INTEREST: "Further action is not in the public interest",
    OutcomeCategory.FURTHER_INVESTIGATION_NOT_IN_PUBLIC_INTEREST: "Further investigation is not in the public interest",
    OutcomeCategory.IMPRISONED: "Offender sent to prison",
    OutcomeCategory.LOCAL_RESOLUTION: "Local resolution",
    OutcomeCategory.NO_FURTHER_ACTION: "Investigation complete; no suspect identified",
    OutcomeCategory.NOT_GUILTY: "Defendant found not guilty",
    OutcomeCategory.OTHER_COURT_DISPOSAL: "Offender otherwise dealt with",
    OutcomeCategory.PENALTY_NOTICE_ISSUED: "Offender given penalty notice",
    OutcomeCategory.SENT_TO_CROWN_COURT: "Defendant sent to Crown Court",
    OutcomeCategory.SENTENCED_IN_ANOTHER_CASE: "Suspect charged as part of another case",
    OutcomeCategory.STATUS_UPDATE_UNAVAILABLE: "Status update unavailable",
    OutcomeCategory.SUSPENDED_SENTENCE: "Offender given suspended prison sentence",
    OutcomeCategory.UNABLE_TO_PROCEED: "Court case unable to proceed",
    OutcomeCategory.UNABLE_TO_PROSECUTE: "Unable to prosecute suspect",
    OutcomeCategory.UNDER_INVESTIGATION: "Under investigation",
}

# Both spellings -> member. Built once at import, never mutated.
_BY_SPELLING: dict[str, OutcomeCategory] = {
    **{category.slug: category for category in OutcomeCategory},
    **{phrase: category for category, phrase in _PHRASES.items()},
}


def decode_category(raw: str) -> OutcomeCategory:
    """
    Resolve a slug or phrase spelling to its OutcomeCategory.

    Matching is exact: no case folding, trimming or fuzzy lookup.

    Raises:
        UnknownCategory: if *raw* matches no known spelling
    """
    try:
        return _BY_SPELLING[raw]
    except KeyError:
        raise UnknownCategory(raw) from None
