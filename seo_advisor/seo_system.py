"""
SEO prompt templates for the Rank Math advisor.

This module provides:
- The instruction template for the structured analysis (canonical)
- The older flat template that also takes the article permalink
"""

import logging
from typing import Optional

from .schemas import SchemaVariant

logger = logging.getLogger(__name__)


class SEOPromptBuilder:
    """Builds the Gemini instruction prompt for one article."""

    def build_prompt(self, title: str, content: str,
                     permalink: Optional[str] = None,
                     variant: SchemaVariant = SchemaVariant.STRUCTURED) -> str:
        """
        Build the analysis prompt for the selected response variant.

        Args:
            title: Article title exactly as entered
            content: Article body exactly as entered
            permalink: Current permalink, only used by the flat template
            variant: Which response shape the prompt asks for

        Returns:
            Prompt string with the raw inputs interpolated
        """
        if SchemaVariant(variant) is SchemaVariant.FLAT:
            prompt = self.build_flat_prompt(title, content, permalink)
        else:
            prompt = self.build_structured_prompt(title, content)
        logger.debug(f"Built {SchemaVariant(variant).value} prompt ({len(prompt)} chars)")
        return prompt

    def build_structured_prompt(self, title: str, content: str) -> str:
        prompt = f"""
Anda adalah seorang ahli SEO kelas dunia yang berspesialisasi dalam optimasi menggunakan plugin Rank Math.
Tugas Anda adalah menganalisis artikel yang diberikan dan memberikan rekomendasi konkret dan dapat ditindaklanjuti untuk meningkatkan skor SEO-nya.

Informasi Artikel:
- Judul Asli: {title}
- Isi Artikel: {content}

Langkah 1: Identifikasi Kata Kunci
Pertama, analisis judul dan konten untuk mengidentifikasi satu **"focus_keyword"** (Kata Kunci Fokus) utama yang paling ideal.
Kemudian, berikan 4 **"related_keywords"** (campuran short-tail dan long-tail) yang relevan.

Langkah 2: Berikan Rekomendasi Berbasis Kata Kunci Fokus
Gunakan "focus_keyword" yang telah Anda identifikasi untuk memberikan rekomendasi dalam format JSON yang ketat untuk poin-poin berikut:

1.  "seo_title": Buat judul SEO baru yang optimal (kurang dari 60 karakter) yang:
    - Memasukkan Kata Kunci Fokus di awal.
    - Mengandung 'power word' (contoh: 'Panduan', 'Terbaik', 'Lengkap', 'Mudah').
    - Mengandung angka (jika relevan).
    - Memiliki sentimen positif atau negatif yang jelas.
    - PENTING: Hindari penggunaan simbol '&', selalu gunakan kata 'dan' sebagai gantinya.

2.  "meta_description": Buat meta description baru yang menarik untuk diklik. Ini WAJIB dan TIDAK BOLEH lebih dari 160 karakter. Harus mengandung Kata Kunci Fokus.

3.  "url_slug": Sarankan slug URL baru yang singkat dan mengandung Kata Kunci Fokus.

4.  "subheadings": Berikan array berisi 2 objek saran subheading (H2 atau H3). Setiap objek harus memiliki "suggestion" (teks subheading baru yang relevan dan mengandung Kata Kunci Fokus) dan "placement_reason" (penjelasan singkat di mana subheading ini harus ditempatkan, misalnya: "Ganti subheading 'Tentang Topik X' dengan ini untuk penekanan yang lebih kuat.").

5.  "image_alt_text": Sarankan satu teks alt untuk gambar yang relevan dengan artikel dan mengandung Kata Kunci Fokus.

6.  "opening_paragraph_analysis": Analisis paragraf pembuka artikel (sekitar 10% pertama). Kembalikan objek dengan dua kunci: "is_good" (boolean: true jika Kata Kunci Fokus sudah ada dan ditempatkan dengan baik, false jika tidak) dan "suggestion" (string: jika is_good adalah false, berikan paragraf pembuka yang DI TULIS ULANG SEPENUHNYA. Jika is_good adalah true, berikan pujian singkat seperti 'Paragraf pembuka sudah bagus dan mengandung kata kunci fokus!').

7.  "keyword_density_suggestion": Berikan saran singkat dan actionable tentang kepadatan kata kunci. Misalnya, "Kepadatan kata kunci terlihat rendah. Coba tambahkan kata kunci fokus 2-3 kali lagi secara alami di dalam konten."

Langkah 3: Analisis Kekuatan Topik
Berdasarkan konten yang diberikan, analisis kedalaman dan fokus pembahasannya. Berikan skor dari 1-100 pada "topic_strength_score" yang merepresentasikan seberapa komprehensif artikel ini. Kemudian, berikan satu paragraf "topic_strength_recommendation" yang berisi saran konkret tentang cara membuat konten lebih mendalam, detail, dan fokus pada topik utamanya untuk memuaskan search intent pengguna.
"""
        return prompt

    def build_flat_prompt(self, title: str, content: str, permalink: Optional[str] = None) -> str:
        permalink_line = permalink if permalink else "(tidak ada)"

        prompt = f"""
Anda adalah seorang ahli SEO kelas dunia yang berspesialisasi dalam optimasi menggunakan plugin Rank Math.
Tugas Anda adalah menganalisis artikel yang diberikan dan memberikan rekomendasi konkret dan dapat ditindaklanjuti untuk meningkatkan skor SEO-nya.

Informasi Artikel:
- Judul Asli: {title}
- Permalink: {permalink_line}
- Isi Artikel: {content}

Langkah 1: Identifikasi Kata Kunci
Pertama, analisis judul dan konten untuk mengidentifikasi satu **"focus_keyword"** (Kata Kunci Fokus) utama yang paling ideal.
Kemudian, berikan 4 **"related_keywords"** (campuran short-tail dan long-tail) yang relevan.

Langkah 2: Berikan Rekomendasi Berbasis Kata Kunci Fokus
Gunakan "focus_keyword" yang telah Anda identifikasi untuk memberikan rekomendasi dalam format JSON yang ketat untuk poin-poin berikut:

1.  "seo_title": Buat judul SEO baru yang optimal (kurang dari 60 karakter) yang memasukkan Kata Kunci Fokus di awal, mengandung 'power word', angka (jika relevan), dan sentimen yang jelas. Hindari simbol '&', gunakan kata 'dan'.

2.  "meta_description": Buat meta description baru yang menarik untuk diklik. Ini WAJIB dan TIDAK BOLEH lebih dari 160 karakter. Harus mengandung Kata Kunci Fokus.

3.  "url_slug": Sarankan slug URL baru yang singkat dan mengandung Kata Kunci Fokus. Jika permalink saat ini sudah baik, boleh dipertahankan.

4.  "subheadings": Berikan array berisi 2 teks saran subheading (H2 atau H3) yang relevan dan mengandung Kata Kunci Fokus.

5.  "image_alt_text": Sarankan satu teks alt untuk gambar yang relevan dengan artikel dan mengandung Kata Kunci Fokus.

6.  "opening_paragraph_suggestion": Berikan saran singkat agar Kata Kunci Fokus muncul di paragraf pembuka (sekitar 10% pertama artikel).

7.  "keyword_density_suggestion": Berikan saran singkat dan actionable tentang kepadatan kata kunci.
"""
        return prompt
