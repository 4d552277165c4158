import pytest

from ekilirelay import EmailRequest, RelayValidationError, sanitize, validate_email_address, validate_email_request


class TestValidateEmailAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "user@sub.domain.com",
            "a@b.com",
            "first.last@example.org",
            '"john doe"@example.com',
            "admin@[192.168.0.1]",
            "user+tag@mail-server.co.uk",
        ],
    )
    def test_valid_addresses(self, address):
        assert validate_email_address(address) is True

    @pytest.mark.parametrize(
        "address",
        [
            "not-an-email",
            "",
            "user@",
            "@example.com",
            "user@example",
            "user@example.c",
            "user..name@example.com",
            ".user@example.com",
            "user name@example.com",
            "user@exa mple.com",
            "<user>@example.com",
            "user@example.com extra",
        ],
    )
    def test_invalid_addresses(self, address):
        assert validate_email_address(address) is False

    def test_non_string_is_invalid(self):
        assert validate_email_address(None) is False
        assert validate_email_address(42) is False


class TestSanitize:
    def test_strips_angle_brackets_only(self):
        assert sanitize("<script>x</script>") == "scriptx/script"

    def test_trims_whitespace(self):
        assert sanitize("  hello world \n") == "hello world"

    def test_brackets_removed_before_trimming(self):
        assert sanitize("< padded >") == "padded"

    def test_other_characters_untouched(self):
        assert sanitize("a & b \"quoted\" 'single' / \\") == "a & b \"quoted\" 'single' / \\"

    def test_none_becomes_empty_string(self):
        assert sanitize(None) == ""


class TestValidateEmailRequest:
    def test_valid_request_passes(self):
        validate_email_request(EmailRequest(to="a@b.com", subject="hi", message="hello"))

    def test_valid_request_with_headers_passes(self):
        validate_email_request(
            EmailRequest(to="a@b.com", subject="hi", message="hello", headers="Reply-To: x@y.com"),
        )

    def test_invalid_recipient(self):
        with pytest.raises(RelayValidationError) as exc_info:
            validate_email_request(EmailRequest(to="not-an-email", subject="hi", message="hello"))

        assert str(exc_info.value) == "Invalid recipient email address"
        assert exc_info.value.status_code == 400

    def test_blank_subject_and_message(self):
        with pytest.raises(RelayValidationError) as exc_info:
            validate_email_request(EmailRequest(to="a@b.com", subject="   ", message="\n\t"))

        assert exc_info.value.errors == ["Subject is required", "Message is required"]

    def test_all_violations_reported_together(self):
        with pytest.raises(RelayValidationError) as exc_info:
            validate_email_request(EmailRequest())

        assert str(exc_info.value) == "Invalid recipient email address, Subject is required, Message is required"

    def test_message_over_size_limit(self):
        with pytest.raises(RelayValidationError) as exc_info:
            validate_email_request(
                EmailRequest(to="a@b.com", subject="hi", message="x" * 11),
                max_message_bytes=10,
            )

        assert "exceeds maximum size limit" in str(exc_info.value)

    def test_size_limit_counts_utf8_bytes(self):
        # 4 characters, 8 bytes
        request = EmailRequest(to="a@b.com", subject="hi", message="éééé")

        validate_email_request(request, max_message_bytes=8)
        with pytest.raises(RelayValidationError, match="exceeds maximum size limit"):
            validate_email_request(request, max_message_bytes=7)

    def test_blank_oversized_message_reports_both_rules(self):
        with pytest.raises(RelayValidationError) as exc_info:
            validate_email_request(
                EmailRequest(to="a@b.com", subject="hi", message=" " * 11),
                max_message_bytes=10,
            )

        assert exc_info.value.errors == ["Message is required", "Message exceeds maximum size limit"]

    def test_non_string_fields_are_rule_violations(self):
        with pytest.raises(RelayValidationError) as exc_info:
            validate_email_request(EmailRequest(to=123, subject=0, message=["hello"], headers=1))

        assert str(exc_info.value) == (
            "Invalid recipient email address, Subject is required, Message is required, Headers must be a string"
        )
        assert exc_info.value.status_code == 400

    def test_message_exactly_at_limit_passes(self):
        validate_email_request(
            EmailRequest(to="a@b.com", subject="hi", message="x" * 10),
            max_message_bytes=10,
        )
