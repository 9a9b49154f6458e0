"""Tests for SubmitSM response parser."""

import pytest
from emome_sms.parsers import parse_response
from emome_sms.parsers.response_parser import EMPTY_RESPONSE


class TestResponseParser:
    """Test cases for the <br>/pipe response grammar."""
    
    def test_two_recipients(self):
        """Test basic multi-recipient body."""
        result = parse_response("A|0|msg1|ok<br>B|1|msg2|fail<br>")
        assert result.records == {
            "A": ["A", "0", "msg1", "ok"],
            "B": ["B", "1", "msg2", "fail"],
        }
        assert list(result) == ["A", "B"]
        assert not result.malformed
    
    def test_without_trailing_break(self):
        """Test body without trailing marker."""
        result = parse_response("A|0|msg1|ok<br>B|1|msg2|fail")
        assert result.recipients == ["A", "B"]
        assert not result.malformed
    
    def test_repeated_key_last_wins(self):
        """Test repeated recipient keeps the last line."""
        result = parse_response("A|0|x<br>A|1|y<br>")
        assert len(result) == 1
        assert result["A"] == ["A", "1", "y"]
    
    def test_empty_body(self):
        """Test empty body is reported as malformed."""
        result = parse_response("")
        assert len(result) == 0
        assert result.malformed
        assert result.warnings == [EMPTY_RESPONSE]
    
    def test_none_body(self):
        """Test missing body."""
        result = parse_response(None)
        assert len(result) == 0
        assert result.malformed
    
    def test_line_breaks_removed(self):
        """Test CR/LF around records are ignored."""
        result = parse_response("A|0|x<br>\r\nB|1|y<br>\r\n")
        assert result.records == {"A": ["A", "0", "x"], "B": ["B", "1", "y"]}
        assert not result.malformed
    
    @pytest.mark.parametrize("marker", ["<br>", "<BR>", "<br/>", "<br />"])
    def test_marker_variants(self, marker):
        """Test line-break marker spellings."""
        result = parse_response(f"A|0|x{marker}B|1|y{marker}")
        assert result.recipients == ["A", "B"]
    
    def test_wrapper_markup(self):
        """Test HTML wrapper around records is stripped."""
        body = "<html><body>A|0|x<br>B|1|y<br></body></html>"
        result = parse_response(body)
        assert result.records == {"A": ["A", "0", "x"], "B": ["B", "1", "y"]}
        assert not result.malformed
    
    def test_inline_markup(self):
        """Test tags inside a record are removed."""
        result = parse_response("<b>A</b>|0|x<br>")
        assert result["A"] == ["A", "0", "x"]
    
    def test_markup_only_body(self):
        """Test body with no records at all."""
        result = parse_response("<html><body></body></html>")
        assert len(result) == 0
        assert result.warnings == [EMPTY_RESPONSE]
    
    def test_empty_record_reported(self):
        """Test consecutive markers do not create an empty key."""
        result = parse_response("A|0|x<br><br>B|1|y<br>")
        assert "" not in result
        assert result.recipients == ["A", "B"]
        assert result.malformed
        assert "empty record" in result.warnings[0]
    
    def test_record_without_recipient(self):
        """Test record starting with a pipe is reported."""
        result = parse_response("|0|x<br>B|1|y<br>")
        assert "" not in result
        assert result.recipients == ["B"]
        assert result.malformed
    
    def test_single_field_record(self):
        """Test record without pipes keys on itself."""
        result = parse_response("ERROR<br>")
        assert result["ERROR"] == ["ERROR"]
    
    def test_entities_decoded_on_every_line(self):
        """Test entities decode the same with and without tags on the line."""
        plain = parse_response("A|0|x&amp;y<br>")
        tagged = parse_response("<b>A</b>|0|x&amp;y<br>")
        assert plain["A"] == tagged["A"] == ["A", "0", "x&y"]
    
    def test_field_whitespace_kept(self):
        """Test spaces around the first and last fields are passed through."""
        result = parse_response("A|0|id|desc <br> B|1|id2|fail<br>")
        assert result["A"] == ["A", "0", "id", "desc "]
        assert result[" B"] == [" B", "1", "id2", "fail"]


class TestRecipientOutcome:
    """Test cases for per-recipient views."""
    
    def test_accepted(self):
        """Test fields map to to_addr, code, message_id, description."""
        result = parse_response("0912345678|0|MID0001|Success<br>")
        outcome = result.outcome("0912345678")
        assert outcome.to_addr == "0912345678"
        assert outcome.code == "0"
        assert outcome.message_id == "MID0001"
        assert outcome.description == "Success"
        assert outcome.accepted
    
    def test_rejected_short_line(self):
        """Test missing trailing fields are None."""
        result = parse_response("0912345678|-1<br>")
        outcome = result.outcomes[0]
        assert outcome.code == "-1"
        assert outcome.message_id is None
        assert outcome.description is None
        assert not outcome.accepted
    
    def test_unknown_recipient(self):
        """Test lookup of an address that is not in the response."""
        result = parse_response("A|0|x<br>")
        assert result.outcome("B") is None
        assert result.get("B") is None
        assert "B" not in result
