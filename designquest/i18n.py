# designquest/i18n.py — static translation tables (ja / en / zh)

from __future__ import annotations
from typing import Dict, Tuple

LANGUAGES: Tuple[str, ...] = ("ja", "en", "zh")
DEFAULT_LANGUAGE = "ja"

TRANSLATIONS: Dict[str, Dict[str, Dict[str, str]]] = {
    "nav": {
        "ja": {"about": "ABOUT", "aiManga": "AI漫画", "aiVideo": "AI動画", "portfolio": "作品紹介", "vibeCoding": "バイブコーディング"},
        "en": {"about": "ABOUT", "aiManga": "AI MANGA", "aiVideo": "AI VIDEO", "portfolio": "PORTFOLIO", "vibeCoding": "VIBE CODING"},
        "zh": {"about": "关于", "aiManga": "AI漫画", "aiVideo": "AI视频", "portfolio": "作品集", "vibeCoding": "氛围编程"},
    },
    "hero": {
        "ja": {"title": "Design Quest AI", "subtitle": "デザイン × AI で未来を創る",
               "description": "クリエイティブとテクノロジーの融合で、新しい価値を生み出すデザイナー"},
        "en": {"title": "Design Quest AI", "subtitle": "Creating the Future with Design × AI",
               "description": "A designer creating new value through the fusion of creativity and technology"},
        "zh": {"title": "Design Quest AI", "subtitle": "用设计 × AI 创造未来",
               "description": "通过创意与技术的融合创造新价值的设计师"},
    },
    "about": {
        "ja": {
            "title": "ABOUT ME",
            "bio1": "AI×デザインの力で、クリエイターの収益化を支援するデザイナーです。1,000件以上の案件を通じて培った経験で、あなたのアイデアを収益に変えるお手伝いをします。",
            "bio2": "グラフィックデザインをはじめ、Kindle出版、YouTubeサムネイルなど、幅広いジャンルでの制作実績があります。AIツールを活用した効率的なワークフローで、高品質な作品を短期間で制作いたします。",
            "lab": "Design Quest AIは、デザインとAIの共生を目指すクリエイティブ・ラボです。最高峰の生成AI技術を使いこなし、想像の限界を拡張します。",
            "mainTools": "主な使用ツール", "aiTools": "使用AI", "fonts": "使用フォント",
            "imageGen": "画像生成", "videoGen": "動画生成",
            "toolsList": "Illustrator / Photoshop / Premiere Proなど",
            "aiToolsList": "ChatGPT / codex CLI / Antigravity / Google AI Studio / Gemini / NotebookLMなど",
            "fontsList": "Adobeフォントなど",
            "imageGenList": "NanobananaPro / StableDiffusionなど",
            "videoGenList": "Sora2 / Wan2.2など",
        },
        "en": {
            "title": "ABOUT ME",
            "bio1": "I am a designer who supports creator monetization through the power of AI and design. With experience gained through over 1,000 projects, I help turn your ideas into revenue.",
            "bio2": "I have a track record in a wide range of genres, including graphic design, Kindle publishing, and YouTube thumbnails. I produce high-quality work in a short period through efficient workflows utilizing AI tools.",
            "lab": "Design Quest AI is a creative lab aiming for the symbiosis of design and AI. We master the latest generative AI technologies to expand the limits of imagination.",
            "mainTools": "Main Tools", "aiTools": "AI Tools", "fonts": "Fonts",
            "imageGen": "Image Generation", "videoGen": "Video Generation",
            "toolsList": "Illustrator / Photoshop / Premiere Pro etc.",
            "aiToolsList": "ChatGPT / codex CLI / Antigravity / Google AI Studio / Gemini / NotebookLM etc.",
            "fontsList": "Adobe Fonts etc.",
            "imageGenList": "NanobananaPro / StableDiffusion etc.",
            "videoGenList": "Sora2 / Wan2.2 etc.",
        },
        "zh": {
            "title": "关于我",
            "bio1": "我是一名通过 AI 和设计的力量支持创作者变现的设计师。凭借在 1,000 多个项目中的经验，我能帮助您将想法转化为收益。",
            "bio2": "我在平面设计、Kindle 出版和 YouTube 缩略图等多个领域均有丰富的制作经验。通过利用 AI 工具的高效工作流程，我能在短时间内创作出高质量的作品。",
            "lab": "Design Quest AI 是一个旨在实现设计与 AI 共生的创意实验室。我们熟练运用最顶尖的生成式 AI 技术，拓宽想象力的边界。",
            "mainTools": "主要工具", "aiTools": "AI工具", "fonts": "字体",
            "imageGen": "图像生成", "videoGen": "视频生成",
            "toolsList": "Illustrator / Photoshop / Premiere Pro 等",
            "aiToolsList": "ChatGPT / codex CLI / Antigravity / Google AI Studio / Gemini / NotebookLM 等",
            "fontsList": "Adobe 字体等",
            "imageGenList": "NanobananaPro / StableDiffusion 等",
            "videoGenList": "Sora2 / Wan2.2 等",
        },
    },
    "aiManga": {
        "ja": {"title": "AI MANGA SERIES", "viewManga": "View Manga", "closeManga": "Close Manga"},
        "en": {"title": "AI MANGA SERIES", "viewManga": "View Manga", "closeManga": "Close Manga"},
        "zh": {"title": "AI漫画系列", "viewManga": "查看漫画", "closeManga": "关闭漫画"},
    },
    "portfolio": {
        "ja": {"title": "作品紹介", "subtitle": "デザインの力で、ビジネスに価値を", "all": "すべて"},
        "en": {"title": "PORTFOLIO", "subtitle": "Adding Value to Business Through Design", "all": "All"},
        "zh": {"title": "作品集", "subtitle": "通过设计为商业增值", "all": "全部"},
    },
    "categories": {
        "ja": {"all": "すべて", "dtp": "DTPデザイン", "gaina": "GAINA魂", "logo": "ロゴデザイン",
               "kindle": "Kindle表紙", "ai": "AI画像生成", "thumb": "サムネなど", "reviews": "デザイン講座評価"},
        "en": {"all": "All", "dtp": "DTP Design", "gaina": "GAINA Soul", "logo": "Logo Design",
               "kindle": "Kindle Cover", "ai": "AI Generation", "thumb": "Thumbnails", "reviews": "Design Reviews"},
        "zh": {"all": "全部", "dtp": "DTP设计", "gaina": "GAINA魂", "logo": "标志设计",
               "kindle": "Kindle封面", "ai": "AI图像生成", "thumb": "缩略图", "reviews": "设计评价"},
    },
    "vibeCoding": {
        "ja": {"title": "バイブコーディング", "subtitle": "ノーコード開発 × 生成AIによる次世代プロダクト",
               "viewProject": "View Project", "launchProject": "LAUNCH PROJECT"},
        "en": {"title": "VIBE CODING", "subtitle": "Next-Gen Products with No-Code × Generative AI",
               "viewProject": "View Project", "launchProject": "LAUNCH PROJECT"},
        "zh": {"title": "氛围编程", "subtitle": "无代码开发 × 生成AI的下一代产品",
               "viewProject": "查看项目", "launchProject": "启动项目"},
    },
    "aiVideo": {
        "ja": {"title": "AI動画コレクション", "subtitle": "生成AIが織りなす映像美のフロンティア",
               "watchVideo": "Watch Video", "aiVideoLabel": "AI Video"},
        "en": {"title": "AI VIDEO COLLECTION", "subtitle": "Frontier of Visual Beauty Woven by Generative AI",
               "watchVideo": "Watch Video", "aiVideoLabel": "AI Video"},
        "zh": {"title": "AI视频集", "subtitle": "生成AI编织的视觉美学前沿",
               "watchVideo": "观看视频", "aiVideoLabel": "AI视频"},
    },
    "portfolioDetail": {
        "ja": {"detail": "Portfolio Detail", "category": "Category", "projectTitle": "Project Title", "closeWindow": "Close Window"},
        "en": {"detail": "Portfolio Detail", "category": "Category", "projectTitle": "Project Title", "closeWindow": "Close Window"},
        "zh": {"detail": "作品详情", "category": "类别", "projectTitle": "项目标题", "closeWindow": "关闭窗口"},
    },
    "promotions": {
        "ja": {"promo1Title": "GAINA魂 2022 詳細", "promo1Label": "Promotion Details",
               "promo2Title": "My ホームページ", "promo2Label": "Official Identity"},
        "en": {"promo1Title": "GAINA Soul 2022 Details", "promo1Label": "Promotion Details",
               "promo2Title": "My Homepage", "promo2Label": "Official Identity"},
        "zh": {"promo1Title": "GAINA魂 2022 详情", "promo1Label": "推广详情",
               "promo2Title": "我的主页", "promo2Label": "官方身份"},
    },
    "contact": {
        "ja": {"title": "CONTACT", "subtitle": "お気軽にお問い合わせください", "email": "メールを送る"},
        "en": {"title": "CONTACT", "subtitle": "Feel free to contact me", "email": "Send Email"},
        "zh": {"title": "联系方式", "subtitle": "欢迎随时联系", "email": "发送邮件"},
    },
}


def t(section: str, lang: str) -> Dict[str, str]:
    if lang not in LANGUAGES:
        raise ValueError(f"Unsupported language {lang!r}; expected one of {', '.join(LANGUAGES)}")
    return TRANSLATIONS[section][lang]
