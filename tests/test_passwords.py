"""Tests for password candidate generation."""

from datetime import date

from credprobe.modules.passwords import PasswordOptions, capitalize, generate, org_word
from credprobe.modules.passwords.generator import from_firstname, from_org_or_url
from credprobe.modules.passwords.transforms import leet_stage, pipeline_for_depth

TODAY = date(2026, 10, 19)


class TestCapitalize:
    """Test first-letter capitalization."""

    def test_empty_string(self):
        assert capitalize("") == ""

    def test_leading_digit_unchanged(self):
        assert capitalize("1abc") == "1abc"

    def test_only_first_letter_changes(self):
        assert capitalize("password") == "Password"
        assert capitalize("pASSWORD") == "PASSWORD"


class TestOrgWord:
    """Test deriving the organisation word from a seed."""

    def test_url_strips_tld_and_second_level(self):
        assert org_word("https://Example.ACME.com") == "example"

    def test_url_with_single_label_before_tld(self):
        assert org_word("https://acme.com/login") == "acme"

    def test_plain_name_is_used_raw(self):
        assert org_word("acme") == "acme"

    def test_ip_literal_is_skipped(self):
        assert org_word("10.0.0.1") is None
        assert org_word("::1") is None
        assert from_org_or_url("192.168.1.1", 2026) == []

    def test_url_with_ip_host_is_skipped(self):
        assert org_word("http://10.0.0.1/login") is None

    def test_unparseable_url_is_used_raw(self):
        assert org_word("http://[bad") == "http://[bad"
        passwords = generate(PasswordOptions(org_or_url="http://[bad"), today=TODAY)
        assert "http://[bad2026" in passwords


class TestGenerators:
    """Test the individual base generators."""

    def test_firstname_birth_years(self):
        passwords = from_firstname("Dana", 2026)
        assert len(passwords) == 21
        assert passwords[0] == "Dana1976"
        assert passwords[-1] == "Dana1996"
        assert all(p.startswith("Dana") and len(p) == 8 for p in passwords)

    def test_no_firstname_no_passwords(self):
        assert from_firstname("", 2026) == []

    def test_org_recent_years(self):
        passwords = from_org_or_url("https://Example.ACME.com", 2026)
        assert len(passwords) == 20
        assert passwords[:4] == ["example2022", "example22", "example@2022", "example@22"]
        assert "example@26" in passwords
        assert not any("2021" in p for p in passwords)


class TestTransforms:
    """Test transformation stages and depth selection."""

    def test_leet_stage_emits_five_forms(self):
        assert leet_stage(["qwertyuiop"]) == [
            "qwertyuiop",
            "qwertyui0p",
            "qwertyu1op",
            "qw3rtyuiop",
            "qw3rtyu10p",
        ]

    def test_depth_selects_one_pipeline(self):
        assert pipeline_for_depth(0) == ()
        assert len(pipeline_for_depth(1)) == 1
        assert len(pipeline_for_depth(2)) == 1
        assert len(pipeline_for_depth(3)) == 2
        assert pipeline_for_depth(-4) == pipeline_for_depth(0)
        assert pipeline_for_depth(9) == pipeline_for_depth(3)


class TestGenerate:
    """Test the full generation pipeline."""

    def test_depth_zero_is_deduplicated_base_list(self):
        passwords = generate(PasswordOptions(), today=TODAY)
        # 13 common + 4 keyboard walks, two of which overlap
        assert len(passwords) == 15
        assert passwords == sorted(passwords)

    def test_deterministic(self):
        options = PasswordOptions(depth=3, firstname="Dana", org_or_url="https://acme.com")
        assert generate(options, today=TODAY) == generate(options, today=TODAY)

    def test_firstname_and_org_included(self):
        options = PasswordOptions(firstname="Dana", org_or_url="https://Example.ACME.com")
        passwords = generate(options, today=TODAY)
        assert "Dana1976" in passwords
        assert "Dana1996" in passwords
        assert "example2026" in passwords
        assert "example@22" in passwords

    def test_depth_one_adds_capitalized(self):
        passwords = generate(PasswordOptions(depth=1), today=TODAY)
        assert "password" in passwords
        assert "Password" in passwords
        assert "12345678" in passwords

    def test_depth_two_adds_leet_without_capitalized(self):
        passwords = generate(PasswordOptions(depth=2), today=TODAY)
        assert "passw0rd" in passwords
        assert "qw3rtyu10p" in passwords
        assert "Password" not in passwords

    def test_depth_three_stacks_capitalize_on_leet(self):
        passwords = generate(PasswordOptions(depth=3), today=TODAY)
        assert "Passw0rd" in passwords
        assert "Qw3rtyu10p" in passwords
        assert len(passwords) == len(set(passwords))
        assert passwords == sorted(passwords)

    def test_negative_depth_behaves_like_zero(self):
        assert generate(PasswordOptions(depth=-1), today=TODAY) == generate(
            PasswordOptions(depth=0), today=TODAY
        )
