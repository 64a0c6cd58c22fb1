"""
Single Level of Abstraction - correct implementation

``process_document`` reads as three steps: gather statistics, tidy the
text, summarise. Each step is its own small function working at one level
of detail, and the processor only orchestrates documents.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SUMMARY_LENGTH = 100


@dataclass(frozen=True)
class Statistics:
    word_count: int
    character_count: int
    paragraph_count: int


@dataclass(frozen=True)
class ProcessedDocument:
    title: str
    statistics: Statistics
    formatted_content: str
    summary: str


def paragraphs(text: str) -> List[str]:
    return [p for p in PARAGRAPH_BREAK.split(text) if p.strip()]


def count_words(text: str) -> int:
    return len(text.split())


def count_characters(text: str) -> int:
    return len(re.sub(r"\s", "", text))


def calculate_statistics(text: str) -> Statistics:
    return Statistics(count_words(text), count_characters(text), len(paragraphs(text)))


def format_content(text: str) -> str:
    return "\n\n".join(" ".join(paragraph.split()) for paragraph in paragraphs(text))


def summarize(text: str, length: int = SUMMARY_LENGTH) -> str:
    return text[:length] + ("..." if len(text) > length else "")


def process_document(title: str, content: str) -> ProcessedDocument:
    return ProcessedDocument(
        title=title,
        statistics=calculate_statistics(content),
        formatted_content=format_content(content),
        summary=summarize(content),
    )


@dataclass
class DocumentProcessor:
    documents: Dict[str, ProcessedDocument] = field(default_factory=dict)

    def process_all(self, sources: List[Dict[str, str]]) -> List[ProcessedDocument]:
        return [self.process(source["title"], source["content"]) for source in sources]

    def process(self, title: str, content: str) -> ProcessedDocument:
        document = process_document(title, content)
        self.documents[title] = document
        return document

    def find(self, title: str) -> Optional[ProcessedDocument]:
        return self.documents.get(title)


SAMPLE_DOCUMENTS = [
    {
        "title": "Introduction to Python",
        "content": "Python is a general purpose programming language.\n\n"
                   "It is   dynamically typed and garbage collected. It supports several paradigms, "
                   "including structured, object-oriented and functional programming.",
    },
    {
        "title": "Design Principles",
        "content": "Software design principles are guidelines that help developers create software "
                   "that is easy to maintain and extend.\n\n"
                   "They include SOLID, DRY, KISS and YAGNI.",
    },
]


def report(document: ProcessedDocument) -> None:
    stats = document.statistics
    print(f"\nTitle: {document.title}")
    print(f"Words: {stats.word_count}, characters: {stats.character_count}, "
          f"paragraphs: {stats.paragraph_count}")
    print(f"Summary: {document.summary}")
    print(f"Formatted content:\n{document.formatted_content}")


def main():
    processor = DocumentProcessor()
    print("Processed documents:")
    for document in processor.process_all(SAMPLE_DOCUMENTS):
        report(document)


if __name__ == "__main__":
    main()
