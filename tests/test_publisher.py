"""Tests for the last-writer-wins summary publisher."""

from evdash.aggregation.bundle import recompute
from evdash.models.types import FilterCriteria, SummaryBundle, YearRange
from evdash.worker.publisher import SummaryPublisher


class TestPublisherState:
    """Test current bundle ownership."""

    def test_initially_empty(self, fleet_records):
        publisher = SummaryPublisher(fleet_records)
        assert publisher.current == SummaryBundle.empty()

    def test_update_publishes_bundle(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        bundle = publisher.update(open_criteria)
        assert publisher.current == bundle
        assert publisher.current == recompute(fleet_records, open_criteria)
        assert publisher.criteria == open_criteria

    def test_replace_records_recomputes_with_last_criteria(self, fleet_records, tesla_records):
        criteria = FilterCriteria(year=YearRange(min=2020, max=2020))
        publisher = SummaryPublisher(fleet_records, criteria)
        publisher.replace_records(tesla_records)
        assert publisher.current.count_by_make == {"Tesla": 2}

    def test_replace_with_none_yields_empty(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        publisher.update(open_criteria)
        publisher.replace_records(None)
        assert publisher.current == SummaryBundle.empty()


class TestLastWriterWins:
    """Test that only the most recently started request publishes."""

    def test_stale_token_rejected(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        first = publisher.begin()
        second = publisher.begin()

        newer = recompute(fleet_records, FilterCriteria(country="King"))
        older = recompute(fleet_records, open_criteria)

        assert publisher.publish(second, newer) is True
        assert publisher.publish(first, older) is False
        assert publisher.current == newer

    def test_tokens_increase(self):
        publisher = SummaryPublisher()
        assert publisher.begin() < publisher.begin()


class TestSubscribers:
    """Test change notification."""

    def test_subscriber_receives_published_bundle(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        received = []
        publisher.subscribe(received.append)

        bundle = publisher.update(open_criteria)

        assert received == [bundle]

    def test_stale_publish_not_notified(self, fleet_records):
        publisher = SummaryPublisher(fleet_records)
        received = []
        publisher.subscribe(received.append)

        stale = publisher.begin()
        publisher.begin()
        publisher.publish(stale, SummaryBundle.empty())

        assert received == []

    def test_unsubscribe(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        received = []
        unsubscribe = publisher.subscribe(received.append)
        unsubscribe()

        publisher.update(open_criteria)

        assert received == []

    def test_failing_subscriber_does_not_block_others(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        received = []

        def broken(bundle):
            raise RuntimeError("render failed")

        publisher.subscribe(broken)
        publisher.subscribe(received.append)

        publisher.update(open_criteria)

        assert len(received) == 1


class TestConsumerIsolation:
    """Test that consumers cannot edit each other's bundle."""

    def test_editing_current_does_not_leak(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        publisher.update(open_criteria)

        publisher.current.count_by_make["TESLA"] = 999

        assert publisher.current.count_by_make["TESLA"] == 3

    def test_subscriber_edit_does_not_leak(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        received = []

        def clear_counts(bundle):
            bundle.count_by_make.clear()

        publisher.subscribe(clear_counts)
        publisher.subscribe(received.append)

        publisher.update(open_criteria)

        assert received[0].count_by_make == {"TESLA": 3, "NISSAN": 1, "CHEVROLET": 1}
        assert publisher.current.count_by_make == received[0].count_by_make

    def test_editing_returned_bundle_does_not_leak(self, fleet_records, open_criteria):
        publisher = SummaryPublisher(fleet_records)
        bundle = publisher.update(open_criteria)

        bundle.avg_msrp_by_make.clear()

        assert publisher.current.avg_msrp_by_make == {"TESLA": 34950, "CHEVROLET": 33950}
