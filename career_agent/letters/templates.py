"""Static per-language letter text: fallback drafts and reply summaries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from career_agent.profile.facts import headline, latest_role_title
from career_agent.routing.locales import BASE_LANGUAGE
from career_agent.schemas.letter import LetterDraft


@dataclass(frozen=True)
class LetterTemplate:
    opening: str
    body: str
    closing: str
    signature_placeholder: str
    default_title: str
    default_role: str
    reply: str


LETTER_TEMPLATES: dict[str, LetterTemplate] = {
    "en": LetterTemplate(
        opening="Dear Hiring Manager,",
        body=(
            "I am excited to apply for this opportunity. With my background in {title}, "
            "I believe I would be a valuable addition to your team.\n\n"
            "My experience includes {role} where I developed skills that directly align with this role. "
            "I am passionate about delivering excellent results and contributing to team success.\n\n"
            "I would welcome the opportunity to discuss how my skills and experience can benefit your organization."
        ),
        closing=(
            "Thank you for considering my application. "
            "I look forward to the opportunity to discuss how I can contribute to your team."
        ),
        signature_placeholder="Your Name",
        default_title="this field",
        default_role="relevant positions",
        reply=(
            "I've drafted a cover letter for you! You can view and edit it in the Letter tab. "
            "Here's what I've created:\n\n**Opening:** {opening}\n\n**Key points covered:**\n"
            "- Highlighted your relevant experience\n- Connected your skills to the role\n"
            "- Expressed genuine interest\n\n**Closing:** Professional sign-off with your name\n\n"
            "Feel free to customize it further using the Editor!"
        ),
    ),
    "nl": LetterTemplate(
        opening="Geachte heer/mevrouw,",
        body=(
            "Met veel enthousiasme solliciteer ik naar deze functie. Met mijn achtergrond in {title} "
            "ben ik ervan overtuigd dat ik een waardevolle aanvulling op uw team kan zijn.\n\n"
            "In mijn ervaring als {role} heb ik vaardigheden ontwikkeld die direct aansluiten bij deze rol. "
            "Ik haal energie uit het leveren van goede resultaten en draag graag bij aan het succes van het team.\n\n"
            "Ik ga graag met u in gesprek over hoe mijn ervaring uw organisatie kan versterken."
        ),
        closing=(
            "Hartelijk dank voor het overwegen van mijn sollicitatie. "
            "Ik kijk uit naar de mogelijkheid om kennis te maken."
        ),
        signature_placeholder="Uw naam",
        default_title="dit vakgebied",
        default_role="relevante functies",
        reply=(
            "Ik heb een motivatiebrief voor je opgesteld! Je kunt hem bekijken en bewerken in het tabblad Brief. "
            "Dit heb ik gemaakt:\n\n**Aanhef:** {opening}\n\n**Belangrijkste punten:**\n"
            "- Je relevante ervaring uitgelicht\n- Je vaardigheden gekoppeld aan de functie\n"
            "- Oprechte interesse getoond\n\n**Afsluiting:** Professionele groet met je naam\n\n"
            "Pas hem gerust verder aan in de Editor!"
        ),
    ),
    "de": LetterTemplate(
        opening="Sehr geehrte Damen und Herren,",
        body=(
            "mit großem Interesse bewerbe ich mich auf diese Position. Mit meinem Hintergrund in {title} "
            "bin ich überzeugt, Ihr Team wertvoll ergänzen zu können.\n\n"
            "In meiner Tätigkeit als {role} habe ich Fähigkeiten entwickelt, die genau zu dieser Stelle passen. "
            "Es ist mir wichtig, hervorragende Ergebnisse zu liefern und zum Erfolg des Teams beizutragen.\n\n"
            "Gerne erläutere ich Ihnen in einem persönlichen Gespräch, wie meine Erfahrung Ihr Unternehmen "
            "unterstützen kann."
        ),
        closing=(
            "Vielen Dank für die Berücksichtigung meiner Bewerbung. "
            "Ich freue mich auf ein persönliches Gespräch."
        ),
        signature_placeholder="Ihr Name",
        default_title="diesem Bereich",
        default_role="relevanten Positionen",
        reply=(
            "Ich habe ein Anschreiben für dich entworfen! Du kannst es im Tab Anschreiben ansehen und bearbeiten. "
            "Das habe ich erstellt:\n\n**Anrede:** {opening}\n\n**Wichtigste Punkte:**\n"
            "- Deine relevante Erfahrung hervorgehoben\n- Deine Fähigkeiten mit der Stelle verknüpft\n"
            "- Echtes Interesse gezeigt\n\n**Schluss:** Professioneller Gruß mit deinem Namen\n\n"
            "Passe es gerne im Editor weiter an!"
        ),
    ),
    "fr": LetterTemplate(
        opening="Madame, Monsieur,",
        body=(
            "C'est avec enthousiasme que je vous présente ma candidature pour ce poste. Fort de mon parcours "
            "en {title}, je suis convaincu de pouvoir apporter une réelle valeur à votre équipe.\n\n"
            "Mon expérience en tant que {role} m'a permis de développer des compétences directement liées à ce rôle. "
            "J'ai à cœur d'obtenir d'excellents résultats et de contribuer à la réussite collective.\n\n"
            "Je serais ravi d'échanger avec vous sur la manière dont mon expérience peut servir votre organisation."
        ),
        closing=(
            "Je vous remercie de l'attention portée à ma candidature "
            "et reste à votre disposition pour un entretien."
        ),
        signature_placeholder="Votre nom",
        default_title="ce domaine",
        default_role="postes pertinents",
        reply=(
            "J'ai rédigé une lettre de motivation pour vous ! Vous pouvez la consulter et la modifier dans "
            "l'onglet Lettre. Voici ce que j'ai créé :\n\n**Ouverture :** {opening}\n\n**Points clés :**\n"
            "- Votre expérience pertinente mise en avant\n- Vos compétences reliées au poste\n"
            "- Un intérêt sincère exprimé\n\n**Conclusion :** Formule de politesse avec votre nom\n\n"
            "N'hésitez pas à la personnaliser dans l'éditeur !"
        ),
    ),
    "es": LetterTemplate(
        opening="Estimado/a responsable de selección:",
        body=(
            "Me complace presentar mi candidatura para este puesto. Con mi trayectoria en {title}, "
            "estoy convencido de que puedo aportar un gran valor a su equipo.\n\n"
            "Mi experiencia como {role} me ha permitido desarrollar habilidades que encajan directamente "
            "con este puesto. Me motiva lograr resultados excelentes y contribuir al éxito del equipo.\n\n"
            "Me encantaría conversar sobre cómo mi experiencia puede beneficiar a su organización."
        ),
        closing=(
            "Gracias por considerar mi candidatura. "
            "Quedo a la espera de la oportunidad de conversar con ustedes."
        ),
        signature_placeholder="Su nombre",
        default_title="este ámbito",
        default_role="puestos relevantes",
        reply=(
            "¡He redactado una carta de presentación para ti! Puedes verla y editarla en la pestaña Carta. "
            "Esto es lo que he creado:\n\n**Saludo:** {opening}\n\n**Puntos clave:**\n"
            "- Destacada tu experiencia relevante\n- Conectadas tus habilidades con el puesto\n"
            "- Mostrado un interés genuino\n\n**Cierre:** Despedida profesional con tu nombre\n\n"
            "¡Puedes personalizarla más en el Editor!"
        ),
    ),
}

SIGNATURE_PLACEHOLDERS = frozenset(template.signature_placeholder.lower() for template in LETTER_TEMPLATES.values())


def letter_template(language: str) -> LetterTemplate:
    return LETTER_TEMPLATES.get(language) or LETTER_TEMPLATES[BASE_LANGUAGE]


def fallback_draft(language: str, profile: dict[str, Any] | None, name: str = "") -> LetterDraft:
    template = letter_template(language)
    code = language if language in LETTER_TEMPLATES else BASE_LANGUAGE
    return LetterDraft(
        opening=template.opening,
        body=template.body.format(
            title=headline(profile) or template.default_title,
            role=latest_role_title(profile) or template.default_role,
        ),
        closing=template.closing,
        signature=name or template.signature_placeholder,
        detected_language=code,
    )


def reply_message(draft: LetterDraft) -> str:
    return letter_template(draft.detected_language).reply.format(opening=draft.opening)
