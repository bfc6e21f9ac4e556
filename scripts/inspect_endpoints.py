#!/usr/bin/env python3
"""
Script to inspect an OpenAPI/Swagger document the way the MCP server sees it.

This script loads a document from a URL or file into a fresh endpoint index
and prints index statistics and the endpoints matching a query.
"""
import os
import sys
import argparse

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.tools.document_loader import fetch_document
from src.tools.endpoint_index import EndpointIndex
from src.utils.formatters import search_results_formatter


def main():
    """Main function to inspect a document."""
    parser = argparse.ArgumentParser(
        description="Load an OpenAPI/Swagger document and list its indexed endpoints."
    )
    parser.add_argument("source", help="URL or file path of the document")
    parser.add_argument(
        "--name",
        default="api",
        help="Collection name to load the document under (default: api)"
    )
    parser.add_argument(
        "--query",
        default="",
        help="Only list endpoints whose path or description contains this text"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30,
        help="Request timeout in seconds for remote documents (default: 30)"
    )
    args = parser.parse_args()

    try:
        print("\n" + "="*50)
        print("FETCHING DOCUMENT")
        print("="*50)
        document = fetch_document(args.source, timeout=args.timeout)

        index = EndpointIndex()
        count = index.ingest(document, args.name)

        print("\n" + "="*50)
        print("INDEX SUMMARY")
        print("="*50)
        print(f"Collection: {args.name}")
        print(f"Total endpoints indexed: {count}")

        methods = sorted({endpoint.method for endpoint in index.get_endpoints(args.name)})
        if methods:
            print(f"Methods: {', '.join(methods)}")

        print()
        print(search_results_formatter(args.query, index.search(args.query)))

    except Exception as e:
        print(f"Error inspecting document: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
