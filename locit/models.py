"""
Pydantic models for Locit output.

These models provide a type-safe, JSON-serializable view of a paradigm:

    from locit import Noun
    from locit.models import ParadigmResult

    result = ParadigmResult.from_noun(Noun("robots"))
    print(result.model_dump_json())
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from locit.characters import set_caps_style
from locit.constants import CASE_NAMES_LV, Case, GNumber, get_declension_description
from locit.exceptions import NoCaseError


class CaseForms(BaseModel):
    """Singular and plural forms of one grammatical case."""
    case: str = Field(..., description="Case name (e.g., 'genitive')")
    case_lv: str = Field(..., description="Latvian case name (e.g., 'ģenitīvs')")
    singular: Optional[str] = Field(None, description="Singular form, if it exists")
    plural: Optional[str] = Field(None, description="Plural form, if it exists")


class ParadigmResult(BaseModel):
    """
    Full paradigm of a word.

    Forms carry the word's capitalization and, depending on the options,
    the instrumental preposition, exactly as Noun.declension() returns them.
    """
    word: str = Field(..., description="Base form as given")
    declension_group: str = Field(..., description="Declension group name (e.g., 'D1')")
    declension_description: str = Field(..., description="Human-readable declension group")
    gender: str = Field(..., description="Resolved gender")
    root: str = Field(..., description="Root without the declension suffix")
    plural_only: bool = Field(False, description="True if the word has no singular")
    forms: List[CaseForms] = Field(default_factory=list, description="Forms by case")

    @classmethod
    def from_noun(cls, noun) -> "ParadigmResult":
        """Create a ParadigmResult from a Noun, declining it if needed."""
        noun.decline()
        forms = []
        for case in Case:
            forms.append(CaseForms(
                case=case.name.lower(),
                case_lv=CASE_NAMES_LV[case],
                singular=None if noun.plural_only else _read(noun, case, GNumber.SINGULAR),
                plural=_read(noun, case, GNumber.PLURAL),
            ))
        return cls(
            word=set_caps_style(noun.base, noun.caps_style),
            declension_group=noun.declension_group.name,
            declension_description=get_declension_description(noun.declension_group),
            gender=noun.gender.name.lower(),
            root=noun.root,
            plural_only=noun.plural_only,
            forms=forms,
        )

    def form(self, case: str, number: str = "singular") -> Optional[str]:
        """Get a form by case name and number name."""
        for entry in self.forms:
            if entry.case == case:
                return entry.plural if number == "plural" else entry.singular
        return None


def _read(noun, case: Case, number: GNumber) -> Optional[str]:
    try:
        return noun.declension(case, number)
    except NoCaseError:
        return None
