"""
HTML for the advisor page and its result cards.
"""

from html import escape
from typing import List, Optional

from .renderer import (
    DisplayBlock,
    KeywordBlock,
    ListBlock,
    QuoteBlock,
    ScoreBlock,
    SuggestionItem,
    render_emphasis,
)
from .schemas import SchemaVariant

RESULTS_HEADING = "<h2>Rekomendasi Optimasi</h2>"
INIT_ERROR_MESSAGE = "Tidak dapat menginisialisasi aplikasi. Apakah kunci API sudah diatur dengan benar?"
GENERIC_ERROR_MESSAGE = "Terjadi kesalahan yang tidak diketahui."
COPY_RESET_MS = 2000


def _render_item(item: SuggestionItem) -> str:
    if item.detail is not None:
        return (
            f'<li class="{item.css_class} suggestion-complex">{render_emphasis(item.text)}'
            f'<p class="placement-reason"><em>Penempatan:</em> {escape(item.detail)}</p></li>'
        )
    return f'<li class="{item.css_class}">{render_emphasis(item.text)}</li>'


def _render_list(block: ListBlock) -> str:
    items = "".join(_render_item(item) for item in block.items)
    return (
        f'<div class="result-card"><h3>{escape(block.title)}</h3>'
        f'<ul class="suggestion-list">{items}</ul></div>'
    )


def _render_score(block: ScoreBlock) -> str:
    return (
        f'<div class="result-card"><h3>{escape(block.title)}</h3>'
        f'<div class="score-display">Skor: <strong>{block.score} / 100</strong></div>'
        f'<p>{escape(block.recommendation)}</p></div>'
    )


def _render_quote(block: QuoteBlock) -> str:
    return (
        f'<div class="result-card"><h3>{escape(block.title)}</h3>'
        f'<p>Untuk memastikan kata kunci fokus ("<strong>{escape(block.focus_keyword)}</strong>") muncul di awal, '
        f'ganti paragraf pembuka Anda dengan versi yang dioptimalkan ini:</p>'
        f'<blockquote class="suggestion-quote">{escape(block.quote)}</blockquote></div>'
    )


def _render_keywords(block: KeywordBlock) -> str:
    text = escape(block.text)
    return (
        f'<div class="result-card"><h3>{escape(block.title)}</h3>'
        f'<div class="keyword-content"><p class="keyword-text">{text}</p>'
        f'<button type="button" class="copy-btn" aria-label="Salin kata kunci" data-keywords="{text}">Salin</button>'
        f'</div></div>'
    )


_RENDERERS = {
    ScoreBlock: _render_score,
    QuoteBlock: _render_quote,
    KeywordBlock: _render_keywords,
    ListBlock: _render_list,
}


def render_blocks(blocks: List[DisplayBlock]) -> str:
    """Render display blocks into the HTML placed inside the results container."""
    return "".join(_RENDERERS[type(block)](block) for block in blocks)


def render_error_box(message: Optional[str] = None) -> str:
    if message:
        return f'<div id="error-container" class="error-box">Error: {escape(message)}</div>'
    return '<div id="error-container" class="error-box hidden"></div>'


_STYLE = """
body { font-family: system-ui, sans-serif; max-width: 860px; margin: 2rem auto; padding: 0 1rem; color: #1f2937; }
form label { display: block; font-weight: 600; margin-top: 1rem; }
form input, form textarea { width: 100%; padding: .5rem; box-sizing: border-box; }
#generate-btn { margin-top: 1rem; padding: .75rem 1.5rem; }
.hidden { display: none; }
.error-box { background: #fef2f2; color: #b91c1c; padding: 1rem; border-radius: 8px; margin-top: 1rem; }
.result-card { border: 1px solid #e5e7eb; border-radius: 12px; padding: 1rem 1.25rem; margin-top: 1rem; }
.suggestion-list li.suggestion::marker { content: "⚠️ "; }
.suggestion-list li.good::marker { content: "✔️ "; }
.placement-reason { color: #6b7280; margin: .25rem 0 0; }
.suggestion-quote { border-left: 4px solid #6366f1; margin: 0; padding-left: 1rem; }
.keyword-content { display: flex; gap: 1rem; align-items: center; justify-content: space-between; }
.copy-btn.copied { background: #dcfce7; }
"""

_SCRIPT = """
const form = document.getElementById('seo-form');
const generateBtn = document.getElementById('generate-btn');
const resultsContainer = document.getElementById('results-container');
const errorContainer = document.getElementById('error-container');
let isLoading = false;

function setLoading(loading) {
    isLoading = loading;
    generateBtn.disabled = loading;
    generateBtn.textContent = loading ? 'Membuat Rekomendasi...' : 'Buat Rekomendasi SEO';
    if (loading) {
        resultsContainer.classList.add('hidden');
        errorContainer.classList.add('hidden');
        resultsContainer.innerHTML = '%(heading)s';
    }
}

function displayError(message) {
    errorContainer.textContent = 'Error: ' + message;
    errorContainer.classList.remove('hidden');
}

form.addEventListener('submit', async (e) => {
    e.preventDefault();
    if (isLoading) return;
    setLoading(true);
    const payload = {
        title: document.getElementById('article-title').value,
        content: document.getElementById('article-content').value,
    };
    const permalinkInput = document.getElementById('article-permalink');
    if (permalinkInput && permalinkInput.value) payload.permalink = permalinkInput.value;
    try {
        const response = await fetch('/api/analyze', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify(payload),
        });
        if (response.status === 204) return;
        const data = await response.json();
        if (!response.ok) {
            displayError(typeof data.detail === 'string' ? data.detail : '%(generic)s');
            return;
        }
        resultsContainer.innerHTML = '%(heading)s' + data.html;
        resultsContainer.classList.remove('hidden');
    } catch (err) {
        console.error(err);
        displayError(err instanceof Error ? err.message : '%(generic)s');
    } finally {
        setLoading(false);
    }
});

resultsContainer.addEventListener('click', (e) => {
    const copyButton = e.target.closest('.copy-btn');
    if (!copyButton) return;
    navigator.clipboard.writeText(copyButton.dataset.keywords).then(() => {
        copyButton.textContent = 'Disalin!';
        copyButton.classList.add('copied');
        setTimeout(() => {
            copyButton.textContent = 'Salin';
            copyButton.classList.remove('copied');
        }, %(copy_reset_ms)d);
    }).catch(err => {
        console.error('Failed to copy keywords: ', err);
        copyButton.textContent = 'Gagal';
    });
});
""" % {"heading": RESULTS_HEADING, "generic": GENERIC_ERROR_MESSAGE, "copy_reset_ms": COPY_RESET_MS}


def render_index_page(variant: SchemaVariant = SchemaVariant.STRUCTURED,
                      init_error: Optional[str] = None) -> str:
    """
    Render the full advisor page.

    When ``init_error`` is set the error box is shown and the submit
    button is disabled for the whole session.
    """
    permalink_field = ""
    if SchemaVariant(variant) is SchemaVariant.FLAT:
        permalink_field = (
            '<label for="article-permalink">Permalink (opsional)</label>'
            '<input type="url" id="article-permalink" name="permalink" placeholder="https://contoh.com/artikel-anda">'
        )
    disabled = " disabled" if init_error else ""

    return f"""<!DOCTYPE html>
<html lang="id">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Rank Math SEO Advisor</title>
<style>{_STYLE}</style>
</head>
<body>
<h1>Rank Math SEO Advisor</h1>
<form id="seo-form">
  <label for="article-title">Judul Artikel</label>
  <input type="text" id="article-title" name="title" required>
  {permalink_field}
  <label for="article-content">Isi Artikel</label>
  <textarea id="article-content" name="content" rows="16" required></textarea>
  <button type="submit" id="generate-btn"{disabled}>Buat Rekomendasi SEO</button>
</form>
{render_error_box(init_error)}
<section id="results-container" class="hidden">{RESULTS_HEADING}</section>
<script>{_SCRIPT}</script>
</body>
</html>"""
