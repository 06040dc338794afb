from tronald import Pageable, TronaldClient, TronaldClientError, TronaldHTTPError


def main():
    client = TronaldClient()

    try:
        tags = client.list_tags()
        print(f"{len(tags)} tags available, e.g. {tags[:3]}")

        quote = client.get_random_quote(tag=tags[0] if tags else None)
        print(f"[{quote.id}] {quote.value}")
        print(f"  appeared at: {quote.date}, source: {quote.source_url}")
        print(f"  tags: {', '.join(quote.tags)}")

        page = client.search("wall", Pageable(page=1, size=5))
        print(f"Search found {page.total_elements} quotes over {page.total_pages} pages.")
        for q in page:
            print(f"  - {q.value[:80]}")

        if page.has_next:
            page = client.search("wall", page.next_pageable())
            print(f"Page {page.number} has {page.number_of_elements} quotes.")

        client.get_random_quote(tag="no such tag")

    except TronaldHTTPError as e:
        print(f"API error #{e.status}: {e.message}")

    except TronaldClientError as e:
        print(f"Error: {e}")

    finally:
        client.close()


if __name__ == "__main__":
    main()
