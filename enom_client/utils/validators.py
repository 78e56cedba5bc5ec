"""
Domain name validation: splitting a domain into SLD and TLD
against a list of recognized TLDs
"""

from typing import Iterable, Sequence, Tuple

from enom_client.exceptions import DomainError


# TLDs accepted by default. Order matters: the first matching TLD wins,
# so more specific entries (e.g. 'co.uk') must come before their suffixes.
ALLOWED_TLDS: Tuple[str, ...] = ("com", "net", "org")


class DomainValidator:
    """Validator for domain names and TLDs"""

    @classmethod
    def split(cls, domain: str, recognized_tlds: Sequence[str] = ALLOWED_TLDS) -> Tuple[str, str]:
        """
        Split a domain into its second-level label and TLD.

        The first TLD of ``recognized_tlds`` that the domain ends with
        (on a dot boundary, case-sensitive) is selected. The SLD is the
        single label immediately before it, so 'www.example.com' gives
        ('example', 'com').

        Args:
            domain: Fully qualified domain name (e.g., 'example.com')
            recognized_tlds: Ordered TLDs to match against

        Returns:
            Tuple of (sld, tld)

        Raises:
            DomainError: If no recognized TLD matches
        """
        for tld in recognized_tlds:
            suffix = f".{tld}"
            if domain.endswith(suffix):
                sld = domain[:-len(suffix)].rsplit(".", 1)[-1]
                if sld:
                    return sld, tld
                break

        raise DomainError(
            f"Specified domain ({domain}) is not on the list of recognized TLDs: "
            f"{', '.join(recognized_tlds)}."
        )

    @classmethod
    def is_valid_tld(cls, tld: str, recognized_tlds: Iterable[str] = ALLOWED_TLDS, allow_any: bool = False) -> bool:
        """Check a TLD against the recognized list unless any TLD is allowed"""
        return allow_any or tld in recognized_tlds


def get_sld_and_tld(domain: str, recognized_tlds: Sequence[str] = ALLOWED_TLDS) -> Tuple[str, str]:
    """Convenience function for splitting a domain"""
    return DomainValidator.split(domain, recognized_tlds)


def is_valid_tld(tld: str, recognized_tlds: Iterable[str] = ALLOWED_TLDS, allow_any: bool = False) -> bool:
    """Convenience function for TLD validation"""
    return DomainValidator.is_valid_tld(tld, recognized_tlds, allow_any)
