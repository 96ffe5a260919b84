"""Text chunker implementation."""

from langchain_text_splitters import RecursiveCharacterTextSplitter

from docsearch.domain.entities import CorpusConfig
from docsearch.domain.value_objects import ChunkingStrategy

_SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class TextChunker:
    """Chunker supporting recursive (separator-aware) and fixed-window splitting.

    Chunk size and overlap are measured in characters.
    """

    def chunk(self, text: str, config: CorpusConfig) -> list[str]:
        """Split text into ordered chunks with overlap."""
        text = text.strip()
        if not text:
            return []

        if config.strategy == ChunkingStrategy.RECURSIVE:
            return self._recursive(text, config)
        if config.strategy == ChunkingStrategy.FIXED:
            return self._fixed(text, config)
        raise ValueError(f"Unsupported strategy: {config.strategy}")

    def _recursive(self, text: str, config: CorpusConfig) -> list[str]:
        splitter = RecursiveCharacterTextSplitter(
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
            length_function=len,
            separators=_SEPARATORS,
        )
        return [c for c in splitter.split_text(text) if c.strip()]

    def _fixed(self, text: str, config: CorpusConfig) -> list[str]:
        step = config.chunk_size - config.chunk_overlap
        chunks: list[str] = []
        start = 0
        while start < len(text):
            chunk = text[start : start + config.chunk_size]
            if chunk.strip():
                chunks.append(chunk)
            if start + config.chunk_size >= len(text):
                break
            start += step
        return chunks
