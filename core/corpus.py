"""Built-in bilingual texts and the in-memory corpus provider."""

from .interfaces import CorpusProvider
from .models import Text

# Candide, chapter 1 (English / French)
CANDIDE_PAIRS = [
    ("In the country of Westphalia, in the castle of Baron Thunder-ten-tronckh, lived a young boy to whom nature had given the gentlest manners.",
     "Dans la Westphalie, dans le château de monsieur le baron de Thunder-ten-tronckh, vivait un jeune garçon à qui la nature avait donné les mœurs les plus douces."),
    ("His face announced his soul.",
     "Sa physionomie annonçait son âme."),
    ("He had sound judgment with a very simple mind, and this is, I think, why he was called Candide.",
     "Il avait le jugement assez droit, avec l'esprit le plus simple; c'est, je crois, pour cette raison qu'on le nommait Candide."),
    ("The old servants of the house suspected that he was the son of the baron's sister and of a worthy gentleman of the neighborhood.",
     "Les anciens domestiques de la maison soupçonnaient qu'il était le fils de la sœur du baron et d'un honnête gentilhomme du voisinage."),
    ("The young lady Cunégonde, aged seventeen, was fresh, plump, and full of appetite.",
     "Mademoiselle Cunégonde, âgée de dix-sept ans, était fraîche, grasse, appétissante."),
    ("The baron's wife weighed about three hundred and fifty pounds and thereby commanded great consideration.",
     "La baronne, qui pesait environ trois cent cinquante livres, s'attirait par là une très grande considération."),
    ("Pangloss taught metaphysico-theologo-cosmolonigology.",
     "Pangloss enseignait la métaphysico-théologo-cosmolonigologie."),
    ("He proved admirably that there is no effect without a cause and that, in this best of all possible worlds, the baron's castle was the most beautiful of castles.",
     "Il prouvait admirablement qu'il n'y a point d'effet sans cause, et que, dans ce meilleur des mondes possibles, le château du baron était le plus beau des châteaux."),
    ("Candide listened attentively and believed innocently.",
     "Candide écoutait attentivement et croyait innocemment."),
    ("He judged that he could not live without seeing Miss Cunégonde and hearing Master Pangloss.",
     "Il jugeait qu'il ne pouvait vivre sans voir mademoiselle Cunégonde et sans entendre maître Pangloss."),
    ("One day, Cunégonde, while walking near the little wood, saw Dr. Pangloss giving a lesson in experimental physics to her mother's chambermaid.",
     "Un jour, Cunégonde, en se promenant auprès du petit bois, vit le docteur Pangloss donner une leçon de physique expérimentale à la femme de chambre de sa mère."),
    ("She returned to the castle all agitated, thoughtful, and full of desire to be learned.",
     "Elle rentra au château tout agitée, toute pensive, toute remplie du désir d'être savante."),
    ("She met Candide behind a screen and dropped her handkerchief.",
     "Elle rencontra Candide derrière un paravent et laissa tomber son mouchoir."),
    ("Candide picked it up, and she took his hand with innocence.",
     "Candide le ramassa; elle lui prit innocemment la main."),
    ("Their mouths met, their eyes sparkled, their knees trembled, and their hearts fluttered.",
     "Leurs bouches se rencontrèrent, leurs yeux s'enflammèrent, leurs genoux tremblèrent, leurs cœurs palpitaient."),
    ("The baron passed by the screen, saw this cause and this effect, and drove Candide from the castle with mighty kicks.",
     "Le baron passa près du paravent, vit cette cause et cet effet, et chassa Candide du château à grands coups de pied."),
]

# The excerpt is repeated to make a session long enough to reach every phase
CANDIDE_REPEATS = 12


def repeat_pairs(pairs: list[tuple[str, str]], repeats: int) -> list[tuple[str, str]]:
    return [pair for _ in range(repeats) for pair in pairs]


def builtin_texts() -> list[Text]:
    """Texts shipped with mingle."""
    return [
        Text(
            text_id='candide-loop',
            title='Candide (Chapter 1 excerpt, repeated)',
            description=("Voltaire's French original with a classic public-domain English translation "
                         "lineage; repeated to create a long progressive reading session."),
            source=("Source tradition: Project Gutenberg / public-domain editions of Candide "
                    "(French original and 19th-century English translations)."),
            pairs=repeat_pairs(CANDIDE_PAIRS, CANDIDE_REPEATS),
            source_language='en',
            target_language='fr',
        ),
    ]


class StaticCorpus(CorpusProvider):
    """Corpus provider over a fixed list of texts."""

    def __init__(self, texts: list[Text] | None = None):
        self.texts = list(texts) if texts is not None else builtin_texts()

    def list_texts(self) -> list[Text]:
        return list(self.texts)

    def get_text(self, text_id: str) -> Text | None:
        for text in self.texts:
            if text.id == text_id:
                return text
        return None
