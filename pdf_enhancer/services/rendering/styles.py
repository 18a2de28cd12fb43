"""Print stylesheet for generated documents."""

PDF_STYLES = """
* { box-sizing: border-box; }

body {
  font-family: 'Georgia', serif;
  line-height: 1.6;
  color: #333;
  margin: 0;
  padding: 0;
}

.cover-page {
  height: 100vh;
  display: flex;
  align-items: center;
  justify-content: center;
  text-align: center;
  page-break-after: always;
}
.cover-title { font-size: 2.5em; margin-bottom: 0.5em; color: #2c3e50; }
.cover-author { font-size: 1.2em; color: #7f8c8d; margin-bottom: 2em; }
.cover-metadata { font-size: 0.9em; color: #666; max-width: 500px; margin: 0 auto; }
.cover-metadata p { margin: 0.5em 0; }

.toc { page-break-after: always; padding: 2em 0; }
.toc h1 { color: #2c3e50; border-bottom: 2px solid #3498db; padding-bottom: 0.5em; }
.toc ul { list-style: none; padding-left: 0; }
.toc ul ul { padding-left: 1.5em; }
.toc li { margin: 0.5em 0; }

.main-content { padding: 2em 0; }
.content-body { text-align: justify; }
.content-body h1, .content-body h2, .content-body h3,
.content-body h4, .content-body h5, .content-body h6 {
  color: #2c3e50;
  margin-top: 2em;
  margin-bottom: 1em;
}
.content-body h1 { font-size: 2em; border-bottom: 2px solid #3498db; padding-bottom: 0.5em; }
.content-body h2 { font-size: 1.5em; }
.content-body p { margin: 1em 0; }
.content-body ul, .content-body ol { margin: 1em 0; padding-left: 2em; }

.original-content { padding: 2em 0; color: #555; }
.original-content h1 { color: #2c3e50; border-bottom: 2px solid #e74c3c; padding-bottom: 0.5em; }
.reading-time { font-size: 0.9em; color: #7f8c8d; }

.citations { page-break-before: always; padding: 2em 0; }
.citations h1 { color: #2c3e50; border-bottom: 2px solid #3498db; padding-bottom: 0.5em; }
.citation {
  margin: 1em 0;
  padding: 1em;
  border-left: 3px solid #3498db;
  background-color: #f8f9fa;
}
.citation-title { font-weight: bold; color: #2c3e50; }
.citation-meta { font-size: 0.9em; color: #666; margin-top: 0.5em; }

.page-break { page-break-before: always; }

a { color: #3498db; text-decoration: none; }

@media print {
  body { font-size: 12pt; }
}
"""

__all__ = ["PDF_STYLES"]
