"""
Unit tests for the gTLD registry models (gtld_entry.py).

Tests cover:
- JSON field aliases and null handling
- Normalization (whitespace trimming, Unicode label fallback)
- Immutability
"""

import pytest
from pydantic import ValidationError

from newgtlds.models.gtld_entry import GTLDEntry, GTLDRegistry


class TestGTLDEntryParsing:
    """Tests for reading registry JSON into GTLDEntry."""

    @pytest.mark.unit
    def test_aliases(self):
        """Test registry field names map onto the model fields."""
        entry = GTLDEntry.model_validate(
            {
                "gTLD": "xn--unup4y",
                "uLabel": "游戏",
                "registryOperator": "Binky Moon, LLC",
                "dateOfContractSignature": "2013-12-19",
                "dateOfDelegation": "2014-02-13",
                "contractTerminated": False,
                "removalDate": "",
            }
        )

        assert entry.a_label == "xn--unup4y"
        assert entry.u_label == "游戏"
        assert entry.registry_operator == "Binky Moon, LLC"
        assert entry.date_of_contract_signature == "2013-12-19"
        assert entry.date_of_delegation == "2014-02-13"
        assert entry.contract_terminated is False
        assert entry.removal_date == ""

    @pytest.mark.unit
    def test_nulls_become_empty(self):
        """Test JSON nulls are read as empty strings and False."""
        entry = GTLDEntry.model_validate(
            {
                "gTLD": "aaa",
                "uLabel": None,
                "registryOperator": None,
                "dateOfContractSignature": None,
                "dateOfDelegation": None,
                "contractTerminated": None,
                "removalDate": None,
            }
        )

        assert entry.u_label == ""
        assert entry.registry_operator == ""
        assert entry.date_of_contract_signature == ""
        assert entry.date_of_delegation == ""
        assert entry.contract_terminated is False
        assert entry.removal_date == ""

    @pytest.mark.unit
    def test_unknown_fields_ignored(self):
        """Test extra registry fields do not break parsing."""
        entry = GTLDEntry.model_validate(
            {"gTLD": "aaa", "applicationId": "1-1234-56789", "specification13": False}
        )
        assert entry.a_label == "aaa"

    @pytest.mark.unit
    def test_missing_gtld_name_rejected(self):
        """Test an entry without a gTLD name fails validation."""
        with pytest.raises(ValidationError):
            GTLDEntry.model_validate({"registryOperator": "X"})

    @pytest.mark.unit
    def test_populate_by_field_name(self):
        """Test entries can be built with Python field names."""
        entry = GTLDEntry(a_label="cpu", registry_operator="op")
        assert entry.a_label == "cpu"
        assert entry.registry_operator == "op"

    @pytest.mark.unit
    def test_frozen(self):
        """Test entries cannot be mutated."""
        entry = GTLDEntry(a_label="cpu")
        with pytest.raises(ValidationError):
            entry.a_label = "gpu"


class TestGTLDEntryNormalized:
    """Tests for GTLDEntry.normalized()."""

    @pytest.mark.unit
    def test_already_normalized(self):
        """Test a clean entry is unchanged."""
        entry = GTLDEntry(
            a_label="cpu",
            u_label="ｃｐｕ",
            date_of_contract_signature="2019-06-13",
            registry_operator="@cpu's bargain gTLD emporium",
        )
        assert entry.normalized() == entry

    @pytest.mark.unit
    def test_extra_whitespace(self):
        """Test surrounding whitespace is trimmed, inner whitespace kept."""
        entry = GTLDEntry(
            a_label="  cpu    ",
            u_label="   ｃｐｕ   ",
            date_of_contract_signature="   2019-06-13    ",
            registry_operator="     @cpu's bargain gTLD emporium (now with bonus whitespace)    ",
        )

        normalized = entry.normalized()

        assert normalized.a_label == "cpu"
        assert normalized.u_label == "ｃｐｕ"
        assert normalized.date_of_contract_signature == "2019-06-13"
        assert normalized.registry_operator == (
            "@cpu's bargain gTLD emporium (now with bonus whitespace)"
        )

    @pytest.mark.unit
    def test_no_explicit_u_label(self):
        """Test the ASCII label is used when there is no Unicode label."""
        normalized = GTLDEntry(a_label="cpu").normalized()
        assert normalized.u_label == "cpu"

    @pytest.mark.unit
    def test_whitespace_only_u_label(self):
        """Test a blank Unicode label falls back to the trimmed ASCII label."""
        normalized = GTLDEntry(a_label=" cpu ", u_label="   ").normalized()
        assert normalized.u_label == "cpu"

    @pytest.mark.unit
    def test_explicit_u_label_preserved(self):
        """Test a non-empty Unicode label is never replaced."""
        normalized = GTLDEntry(a_label="xn--unup4y", u_label="游戏").normalized()
        assert normalized.u_label == "游戏"

    @pytest.mark.unit
    def test_returns_copy(self):
        """Test the original entry is left as it was."""
        entry = GTLDEntry(a_label=" cpu ")
        entry.normalized()
        assert entry.a_label == " cpu "

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "a_label,u_label",
        [("a", ""), (" b", " "), ("c ", "\tc\t"), ("\nd\n", "")],
    )
    def test_no_surrounding_whitespace(self, a_label, u_label):
        """Test normalized string fields never carry surrounding whitespace."""
        normalized = GTLDEntry(
            a_label=a_label,
            u_label=u_label,
            registry_operator=" op ",
            date_of_contract_signature=" 2020-01-01",
        ).normalized()

        for value in (
            normalized.a_label,
            normalized.u_label,
            normalized.registry_operator,
            normalized.date_of_contract_signature,
        ):
            assert value == value.strip()
        assert normalized.u_label != ""


class TestGTLDRegistry:
    """Tests for the registry envelope."""

    @pytest.mark.unit
    def test_gtlds_key(self):
        """Test the gTLDs array is read."""
        registry = GTLDRegistry.model_validate({"gTLDs": [{"gTLD": "aaa"}]})
        assert [e.a_label for e in registry.gtlds] == ["aaa"]

    @pytest.mark.unit
    def test_missing_or_null_array(self):
        """Test a missing or null gTLDs array reads as empty."""
        assert GTLDRegistry.model_validate({}).gtlds == []
        assert GTLDRegistry.model_validate({"gTLDs": None}).gtlds == []
