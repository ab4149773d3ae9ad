# examples/paginate_demo.py
# Run with: python examples/paginate_demo.py
#
# Requires SEQLEDGER_LEDGER (and usually SEQLEDGER_CREDENTIAL) in the environment.

import itertools

from seqledger import APIError, create_client
from seqledger.api import action, stats


if __name__ == "__main__":
    with create_client() as client:
        print(stats.get(client))

        # Item-by-item: pages are fetched only as we advance
        issued = (
            action.ListBuilder()
            .set_filter("type=$1")
            .add_filter_parameter("issue")
            .set_page_size(10)
            .get_iterable(client)
        )
        for a in itertools.islice(issued, 25):
            print(f"{a.timestamp} {a.amount:>8} {a.flavor_id} -> {a.destination_account_id}")

        # Page-by-page, remembering the cursor so a later run can resume
        sums = action.SumBuilder().add_group_by_field("flavor_id").set_page_size(5)
        cursor = None
        for page in sums.get_page_iterable(client):
            for s in page.items:
                print(f"{s.flavor_id}: {s.amount}")
            cursor = page.cursor

        try:
            resumed = sums.get_page(client, cursor) if cursor else None
            print("resumed page:", resumed)
        except APIError as e:
            print(f"[seqledger] {e.seq_code}: {e.message}")
