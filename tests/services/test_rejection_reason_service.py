from app.services.rejection_reason_service import (
    REJECTION_REASONS,
    describe_rejection_reason,
    get_rejection_reasons,
)


class TestDescribeRejectionReason:

    def test_other_reason_uses_custom_text(self):
        assert describe_rejection_reason(7, "custom text") == "custom text"

    def test_other_reason_without_text(self):
        assert describe_rejection_reason(7, None) == "Other reason"
        assert describe_rejection_reason(7, "") == "Other reason"

    def test_unmapped_id_three(self):
        assert describe_rejection_reason(3, None) is None

    def test_mapped_id(self):
        assert describe_rejection_reason(1, None) == "Request sent by mistake"

    def test_custom_text_ignored_for_mapped_ids(self):
        assert describe_rejection_reason(2, "ignored") == "The student's data is incorrect"

    def test_unknown_id(self):
        assert describe_rejection_reason(99) is None


class TestGetRejectionReasons:

    def test_ids_keep_the_gap(self):
        reasons = get_rejection_reasons()
        assert [reason.id for reason in reasons] == [1, 2, 4, 5, 6, 7]

    def test_messages_match_table(self):
        for reason in get_rejection_reasons():
            assert reason.message == REJECTION_REASONS[reason.id]

    def test_does_not_mutate_table(self):
        reasons = get_rejection_reasons()
        reasons.pop()
        assert len(get_rejection_reasons()) == 6
