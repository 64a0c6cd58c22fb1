"""
Single Level of Abstraction - violation

process_documents loops over inputs, splits on regexes, counts characters,
builds dicts, aggregates totals and prints progress, all in one body.
Low-level string work sits next to high-level workflow, so the reader has
to hold both in their head to see what the method is for.
"""

import re


class DocumentProcessor:
    def __init__(self):
        self.documents = []

    def process_documents(self, sources):
        results = []
        for source in sources:
            content = source["content"]
            word_count = len([w for w in re.split(r"\s+", content) if w])
            character_count = len(re.sub(r"\s", "", content))
            raw_paragraphs = re.split(r"\n\s*\n", content)
            paragraph_count = len([p for p in raw_paragraphs if p.strip()])
            formatted = "\n\n".join(re.sub(r"\s+", " ", p.strip()) for p in raw_paragraphs)
            summary = content[:100] + ("..." if len(content) > 100 else "")
            document = {"title": source["title"], "word_count": word_count,
                        "character_count": character_count, "paragraph_count": paragraph_count,
                        "formatted": formatted, "summary": summary, "content": content}
            self.documents.append(document)
            results.append(document)
            print(f"Processed document: {source['title']}")

        total_words = sum(d["word_count"] for d in results)
        total_chars = sum(d["character_count"] for d in results)
        print(f"Total words: {total_words}, total characters: {total_chars}")
        print(f"Average words per document: {total_words / len(results) if results else 0}")
        return results

    def get_document_by_title(self, title):
        for document in self.documents:
            if document["title"] == title:
                lengths = [len(w) for w in document["content"].split()]
                print(f"Retrieved {title}, average word length {sum(lengths) / len(lengths):.2f}")
                return document
        return None


SAMPLE_DOCUMENTS = [
    {"title": "Introduction to Python",
     "content": "Python is a general purpose programming language.\n\n"
                "It is   dynamically typed and garbage collected."},
    {"title": "Design Principles",
     "content": "Software design principles are guidelines.\n\nThey include SOLID, DRY, KISS and YAGNI."},
]


def main():
    processor = DocumentProcessor()
    for document in processor.process_documents(SAMPLE_DOCUMENTS):
        print(f"\n{document['title']}: {document['word_count']} words\n{document['formatted']}")
    processor.get_document_by_title("Design Principles")


if __name__ == "__main__":
    main()
