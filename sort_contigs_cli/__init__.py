"""Sort two-line FASTA contig files by the numeric key in each header."""
