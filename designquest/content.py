# designquest/content.py — static site content
# ----------------------------------------------------------------
# Gallery, manga pages, vibe-coding projects, AI videos and promotion
# links. Everything here is constant; sections only read it.
# ----------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from designquest.i18n import LANGUAGES


@dataclass(frozen=True)
class Category:
    id: str
    key: str


@dataclass(frozen=True)
class GalleryItem:
    id: int
    category: str
    titles: Dict[str, str]
    src: str

    def title(self, lang: str) -> str:
        return self.titles[lang]


@dataclass(frozen=True)
class Project:
    title: str
    url: str
    desc: str
    tags: Tuple[str, ...]


@dataclass(frozen=True)
class Video:
    title: str
    url: str


@dataclass(frozen=True)
class Promotion:
    url: str
    title_key: str
    label_key: str


ALL = "all"

CATEGORIES: Tuple[Category, ...] = (
    Category(ALL, "all"),
    Category("01_dtp", "dtp"),
    Category("02_gaina", "gaina"),
    Category("03_logo", "logo"),
    Category("04_kindle", "kindle"),
    Category("05_ai", "ai"),
    Category("06_thumb", "thumb"),
    Category("07_reviews", "reviews"),
)

ICON_SRC = "img/あろうAiデザインメンター_icon.jpeg"
ICON_ALT = "あろうAiデザインメンター"

MANGA_THUMBNAIL = "00_ai_manga/thumbnail_cover.jpeg"
MANGA_PAGES: Tuple[str, ...] = (
    "00_ai_manga/00_cover_manga.jpeg",
    "00_ai_manga/01_page.jpeg",
    "00_ai_manga/02_page.jpeg",
    "00_ai_manga/03_page.jpeg",
    "00_ai_manga/04_page.jpeg",
    "00_ai_manga/05_page.jpeg",
    "00_ai_manga/06_page.jpeg",
)


# -----------------------------
# Gallery
# -----------------------------
# (id, category, src, ja, en, zh)
_GALLERY_ROWS: List[Tuple[int, str, str, str, str, str]] = [
    (101, "01_dtp", "01_dtp_design/09_higashi_park.jpeg", "東公園パンフレット", "Higashi Park Brochure", "东公园宣传册"),
    (102, "01_dtp", "01_dtp_design/10_rotor_industry.jpeg", "ローター工業パンフレット", "Rotor Industry Brochure", "转子工业宣传册"),
    (103, "01_dtp", "01_dtp_design/11_scn_company.jpeg", "SCN会社案内", "SCN Company Profile", "SCN公司介绍"),
    (104, "01_dtp", "01_dtp_design/12_kaori.jpeg", "kaoriパンフレット", "Kaori Brochure", "Kaori宣传册"),
    (105, "01_dtp", "01_dtp_design/13_gyosho_leaf.jpeg", "ぎょしょうリーフレット", "Gyosho Leaflet", "渔业宣传单"),
    (106, "01_dtp", "01_dtp_design/14_event_guide.jpeg", "イベントガイド", "Event Guide", "活动指南"),
    (107, "01_dtp", "01_dtp_design/15_goen_tofu.jpeg", "豪円とうふプレゼン", "Goen Tofu Presentation", "豪圆豆腐演示"),
    (108, "01_dtp", "01_dtp_design/16_goen_pudding.jpeg", "豪円湯院GOENプリン", "Goen Yuin GOEN Pudding", "豪圆温泉GOEN布丁"),
    (109, "01_dtp", "01_dtp_design/17_goen_smoked_tofu.jpeg", "燻製豆腐リーフレット", "Smoked Tofu Leaflet", "烟熏豆腐宣传单"),
    (110, "01_dtp", "01_dtp_design/18_ballet.jpeg", "バレエ団パンフレット", "Ballet Company Brochure", "芭蕾舞团宣传册"),
    (111, "01_dtp", "01_dtp_design/19_spring_exhibition.jpeg", "春の出店展示会", "Spring Store Exhibition", "春季店铺展览会"),

    (201, "02_gaina", "02_gaina_soul/01_logo.jpeg", "GAINA魂ロゴ", "GAINA Soul Logo", "GAINA魂标志"),
    (202, "02_gaina", "02_gaina_soul/02_logo_image.jpeg", "GAINA魂ロゴイメージ", "GAINA Soul Logo Image", "GAINA魂标志图像"),
    (203, "02_gaina", "02_gaina_soul/03_poster.jpeg", "GAINA魂ポスター", "GAINA Soul Poster", "GAINA魂海报"),
    (204, "02_gaina", "02_gaina_soul/04_pamphlet.jpeg", "GAINA魂パンフレット", "GAINA Soul Brochure", "GAINA魂宣传册"),
    (205, "02_gaina", "02_gaina_soul/05_tickets.jpeg", "GAINA魂チケット", "GAINA Soul Tickets", "GAINA魂门票"),
    (206, "02_gaina", "02_gaina_soul/06_sns.jpeg", "GAINA魂SNS", "GAINA Soul SNS", "GAINA魂SNS"),
    (207, "02_gaina", "02_gaina_soul/07_board_design.jpeg", "GAINA魂ボードデザイン", "GAINA Soul Board Design", "GAINA魂板设计"),
    (208, "02_gaina", "02_gaina_soul/08_business_card.jpeg", "GAINA魂米子ジム名刺", "GAINA Soul Yonago Gym Business Card", "GAINA魂米子健身房名片"),

    (301, "03_logo", "03_logo_design/logo_contact_sheet.jpeg", "ロゴコンタクトシート", "Logo Contact Sheet", "标志联系表"),
    (302, "03_logo", "03_logo_design/gaina_soul.jpeg", "ガイナ魂ロゴ", "Gaina Soul Logo", "盖纳魂标志"),
    (303, "03_logo", "03_logo_design/dermatology.jpeg", "皮膚科ロゴ", "Dermatology Logo", "皮肤科标志"),
    (304, "03_logo", "03_logo_design/station_marche.jpeg", "駅なかマルシェロゴ", "Station Marche Logo", "车站市场标志"),
    (305, "03_logo", "03_logo_design/swan.jpeg", "Swanロゴ", "Swan Logo", "Swan标志"),
]

# Kindle covers 01-08 are "_a" variants, 09-15 "_b"
_GALLERY_ROWS += [
    (400 + n, "04_kindle", f"04_kindle_cover/{n:05d}_cover_{'a' if n <= 8 else 'b'}.jpeg",
     f"Kindle表紙 {n:02d}", f"Kindle Cover {n:02d}", f"Kindle封面 {n:02d}")
    for n in range(1, 16)
]
_GALLERY_ROWS += [
    (500 + n, "05_ai", f"05_ai_generation/portfolio_{n:02d}.jpeg",
     f"AI画像生成 {n:02d}", f"AI Generation {n:02d}", f"AI图像生成 {n:02d}")
    for n in range(1, 7)
]
_GALLERY_ROWS += [
    (601, "06_thumb", "06_thumbnails/20_dqx_seal_monster.jpeg", "DQXシールモンスター採用おすもっこり", "DQX Seal Monster Adoption", "DQX印章怪物采用"),
    (602, "06_thumb", "06_thumbnails/21_youtube_thumbnail.jpeg", "YouTubeサムネイル", "YouTube Thumbnail", "YouTube缩略图"),
    (603, "06_thumb", "06_thumbnails/22_banner_ad.jpeg", "バナー広告", "Banner Ad", "横幅广告"),

    (701, "07_reviews", "07_design_reviews/achievement_03.jpg", "実績・感想 03", "Achievement & Review 03", "成果·感想 03"),
    (702, "07_reviews", "07_design_reviews/review_01.jpg", "評価 01", "Review 01", "评价 01"),
    (703, "07_reviews", "07_design_reviews/review_02.jpg", "評価 02", "Review 02", "评价 02"),
    (704, "07_reviews", "07_design_reviews/review_03.jpg", "評価 03", "Review 03", "评价 03"),
]

GALLERY: Tuple[GalleryItem, ...] = tuple(
    GalleryItem(id=i, category=cat, titles=dict(zip(LANGUAGES, (ja, en, zh))), src=src)
    for i, cat, src, ja, en, zh in _GALLERY_ROWS
)


def gallery_items() -> Tuple[GalleryItem, ...]:
    return GALLERY

def filter_items(items: Sequence[GalleryItem], category_id: str) -> List[GalleryItem]:
    """Every item for 'all', otherwise the items of that category in declaration order."""
    if category_id == ALL:
        return list(items)
    return [item for item in items if item.category == category_id]

def category_for(item: GalleryItem) -> Optional[Category]:
    return next((c for c in CATEGORIES if c.id == item.category), None)

def find_item(item_id: int) -> Optional[GalleryItem]:
    return next((item for item in GALLERY if item.id == item_id), None)


# -----------------------------
# Vibe coding projects
# -----------------------------
_AAP_URL = "https://aap-coral.vercel.app/"
_THREE_VIEW_URL = "https://youware.app/project/8n6f9cenc3?enter_from=share&screen_status=2"
_MANGA_URL = "https://youware.app/project/l81ty32lam?enter_from=share&screen_status=2"

PROJECTS: Dict[str, Tuple[Project, ...]] = {
    "ja": (
        Project("AI美女ポートフォリオサイト", _AAP_URL,
                "AI画像生成によるハイエンドな美女ポートフォリオ。洗練されたビジュアル表現を追求。",
                ("AI画像生成", "Web開発")),
        Project("画像から3面図作成 (youware)", _THREE_VIEW_URL,
                "nanobananaを活用し、1つのキャラクターから精密な3面図を自動生成するプロジェクト。",
                ("nanobanana", "Vibe Coding")),
        Project("nanobananaで漫画を作成 (youware)", _MANGA_URL,
                "AI生成画像を用いたストーリーテリングと、ノーコード環境による漫画制作フロー。",
                ("漫画制作", "ノーコード")),
    ),
    "en": (
        Project("AI Beauty Portfolio Site", _AAP_URL,
                "High-end beauty portfolio using AI image generation. Pursuing refined visual expression.",
                ("AI Generation", "Web Dev")),
        Project("3-View Drawing from Image (youware)", _THREE_VIEW_URL,
                "Project to automatically generate precise 3-view drawings from a single character using nanobanana.",
                ("nanobanana", "Vibe Coding")),
        Project("Create Manga with nanobanana (youware)", _MANGA_URL,
                "Storytelling using AI-generated images and manga production flow in a no-code environment.",
                ("Manga Creation", "No-Code")),
    ),
    "zh": (
        Project("AI美女作品集网站", _AAP_URL,
                "使用AI图像生成的高端美女作品集。追求精致的视觉表现。",
                ("AI图像生成", "Web开发")),
        Project("从图像创建三视图 (youware)", _THREE_VIEW_URL,
                "利用nanobanana从单个角色自动生成精确三视图的项目。",
                ("nanobanana", "Vibe Coding")),
        Project("使用nanobanana创作漫画 (youware)", _MANGA_URL,
                "使用AI生成图像进行故事讲述，以及在无代码环境中的漫画制作流程。",
                ("漫画创作", "无代码")),
    ),
}


# -----------------------------
# AI videos (newest post first)
# -----------------------------
_VIDEO_URLS: Tuple[str, ...] = (
    "https://x.com/ARrow25989974/status/2013537013883097376",
    "https://x.com/ARrow25989974/status/2000872251089105122/video/1",
    "https://x.com/ARrow25989974/status/1996874239379673494?s=20",
    "https://x.com/i/status/1993896080162029641",
    "https://x.com/i/status/1991162516550873523",
    "https://x.com/ARrow25989974/status/1970635643949850761/video/1",
    "https://x.com/ARrow25989974/status/1961406607054799279/video/1",
    "https://x.com/ARrow25989974/status/1960726834204827922/video/1",
    "https://x.com/ARrow25989974/status/1945170933490106776/video/1",
    "https://x.com/i/status/1944091331946791330",
    "https://x.com/ARrow25989974/status/1926330046676959698/video/1",
    "https://x.com/ARrow25989974/status/1915256448382353733/video/1",
    "https://x.com/ARrow25989974/status/1892505972783935836/video/1",
    "https://x.com/i/status/1790776395083510023",
    "https://x.com/i/status/1790031826997682486",
    "https://x.com/i/status/1789658408905568703",
    "https://x.com/i/status/1788592514691420539",
    "https://x.com/i/status/1788236161787498663",
    "https://x.com/i/status/1787855899681489148",
    "https://x.com/i/status/1784560592101240883",
    "https://x.com/i/status/1777349276882116673",
    "https://x.com/i/status/1769009441066881332",
    "https://x.com/i/status/1762397789261283597",
    "https://x.com/i/status/1762150135101096436",
)

_VIDEO_TITLES: Dict[str, Tuple[str, ...]] = {
    "ja": (
        "アニモン動画チャレンジ:新モデル登場!",
        "アニモン動画チャレンジ:フレーム抽出・切り抜き機能登場!",
        "アニモン動画チャレンジ:15秒CM「新モデル＆大型アップデート」",
        "あなたの市場価値、もうゼロになりますよ?―デザイナーの気づき",
        "アニモンニュース:APIプラットフォーム正式リリース",
        "アニモン banana登場",
        "ちゃっちぱい「学園モチーフ」",
        "ルーター攻撃",
        "みちぽっぽ",
        "「ドラグーンクエストzero」 #ViduGameShow",
        "もふたんラジオ",
        "ふくぎょう物語テーマ",
        "近未来マネタイズ少女",
        "「シティーハンター」と「Get Wild」の深い絆",
        "スヌーピーファミリーのオラフ:自己否定せずに生きることの大切さ",
        "プロレスラー大岩選手のBLから学ぶ:裏切りを乗り越える心理テクニック",
        "AI副業での挫折を乗り越え、成功へ導く方法",
        "新型 Switchとマリオと共に未来へジャンプ:任天堂の戦略",
        "マクロスの歌姫から学ぶ:歌詞が記憶に刻む感情の力",
        "中学生でも理解できる!究極のターゲットオーディエンス明確化方法",
        "アルミンに学ぶ!頭脳派の副業戦略",
        "山の頂上で瞑想:AIによるディープフェイク表現",
        "ディープフェイクダンス完成!",
        "ダンス元画像比較",
    ),
    "en": (
        "Animon Video Challenge: New Model Released!",
        "Animon Video Challenge: Frame Extraction & Cutout Feature!",
        "Animon Video Challenge: 15s CM 'New Model & Major Update'",
        "Your Market Value Will Be Zero - Designer's Realization",
        "Animon News: API Platform Official Release",
        "Animon Banana Debut",
        "Chatchipai 'School Motif'",
        "Router Attack",
        "Michipoppo",
        "'Dragoon Quest Zero' #ViduGameShow",
        "Mofutan Radio",
        "Side Business Story Theme",
        "Near-Future Monetization Girl",
        "Deep Bond Between 'City Hunter' and 'Get Wild'",
        "Olaf from Snoopy Family: Importance of Living Without Self-Denial",
        "Learning from Wrestler Oiwa's BL: Psychological Techniques to Overcome Betrayal",
        "Overcoming Setbacks in AI Side Business and Leading to Success",
        "Jumping to the Future with New Switch and Mario: Nintendo's Strategy",
        "Learning from Macross Divas: The Power of Lyrics to Engrave Emotions in Memory",
        "Even Middle Schoolers Can Understand! Ultimate Target Audience Clarification Method",
        "Learning from Armin! Intellectual Side Business Strategy",
        "Meditation on Mountain Peak: AI Deepfake Expression",
        "Deepfake Dance Complete!",
        "Original Dance Image Comparison",
    ),
    "zh": (
        "Animon视频挑战：新模型登场！",
        "Animon视频挑战：帧提取·剪切功能登场！",
        "Animon视频挑战：15秒CM「新模型&大型更新」",
        "你的市场价值将归零——设计师的觉悟",
        "Animon新闻：API平台正式发布",
        "Animon Banana登场",
        "Chatchipai「学园主题」",
        "路由器攻击",
        "Michipoppo",
        "「龙骑士任务Zero」#ViduGameShow",
        "Mofutan电台",
        "副业故事主题",
        "近未来变现少女",
        "「城市猎人」与「Get Wild」的深厚羁绊",
        "史努比家族的奥拉夫：不自我否定地生活的重要性",
        "从摔跤手大岩选手的BL学习：克服背叛的心理技巧",
        "克服AI副业挫折并走向成功的方法",
        "与新型Switch和马里奥一起跳向未来：任天堂的战略",
        "从Macross歌姬学习：歌词铭刻记忆的情感力量",
        "中学生也能理解！终极目标受众明确化方法",
        "向阿尔敏学习！智囊型副业战略",
        "山顶冥想：AI深度伪造表现",
        "深度伪造舞蹈完成！",
        "舞蹈原始图像对比",
    ),
}

VIDEOS: Dict[str, Tuple[Video, ...]] = {
    lang: tuple(Video(title, url) for title, url in zip(titles, _VIDEO_URLS))
    for lang, titles in _VIDEO_TITLES.items()
}


def tweet_id(url: str) -> Optional[str]:
    """Post id from an X/Twitter URL: the segment after 'status', else the last one."""
    parts = url.split("/")
    if "status" in parts:
        i = parts.index("status")
        if i + 1 < len(parts) and parts[i + 1]:
            return parts[i + 1].split("?")[0] or None
    return parts[-1].split("?")[0] or None


# -----------------------------
# Promotions / contact
# -----------------------------
PROMOTIONS: Tuple[Promotion, ...] = (
    Promotion("https://pf01.dq-l.com/", "promo1Title", "promo1Label"),
    Promotion("https://dq-l.com/", "promo2Title", "promo2Label"),
)
HOMEPAGE_URL = "https://dq-l.com/"
