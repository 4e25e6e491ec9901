from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LetterInstruction:
    role: str
    request_label: str
    profile_label: str
    format_label: str
    rules_label: str
    rules: tuple[str, ...]
    return_only: str


_EN_RULES = (
    "Write the whole letter in English",
    "Make the letter specific to the job/company if mentioned",
    "Reference actual experience from the profile",
    "The body has 2-3 paragraphs: interest in the specific role, then 2-3 relevant achievements "
    "that match the role, then enthusiasm and fit",
    "Keep it concise (300-400 words total)",
    "Use double line breaks between paragraphs",
    "Avoid clichés like \"I am writing to apply\"; start with something engaging",
    "Use the candidate's full name as signature when it is known, otherwise leave signature empty",
)

LETTER_INSTRUCTIONS: dict[str, LetterInstruction] = {
    "en": LetterInstruction(
        role="You are a professional cover letter writer. Generate a compelling, personalized cover letter "
        "based on the following:",
        request_label="USER REQUEST",
        profile_label="CANDIDATE PROFILE",
        format_label="Generate a cover letter in the following JSON format:",
        rules_label="IMPORTANT:",
        rules=_EN_RULES,
        return_only="Return ONLY the JSON object.",
    ),
    "nl": LetterInstruction(
        role="Je bent een professionele schrijver van motivatiebrieven. Schrijf een overtuigende, "
        "persoonlijke motivatiebrief op basis van het volgende:",
        request_label="VERZOEK VAN DE GEBRUIKER",
        profile_label="PROFIEL VAN DE KANDIDAAT",
        format_label="Genereer de motivatiebrief in het volgende JSON-formaat:",
        rules_label="BELANGRIJK:",
        rules=(
            "Schrijf de volledige brief in het Nederlands",
            "Maak de brief specifiek voor de functie/het bedrijf als die genoemd worden",
            "Verwijs naar echte ervaring uit het profiel",
            "De kern bestaat uit 2-3 alinea's: interesse in de specifieke functie, daarna 2-3 relevante "
            "prestaties die bij de functie passen, daarna enthousiasme en fit",
            "Houd het beknopt (300-400 woorden in totaal)",
            "Gebruik dubbele regeleinden tussen alinea's",
            "Vermijd clichés zoals \"Hierbij solliciteer ik\"; begin met iets pakkends",
            "Gebruik de volledige naam van de kandidaat als ondertekening als die bekend is, "
            "laat de ondertekening anders leeg",
        ),
        return_only="Geef ALLEEN het JSON-object terug.",
    ),
    "de": LetterInstruction(
        role="Du bist ein professioneller Verfasser von Anschreiben. Erstelle ein überzeugendes, "
        "persönliches Anschreiben auf Grundlage der folgenden Angaben:",
        request_label="ANFRAGE DES NUTZERS",
        profile_label="PROFIL DES KANDIDATEN",
        format_label="Erstelle das Anschreiben im folgenden JSON-Format:",
        rules_label="WICHTIG:",
        rules=(
            "Schreibe das gesamte Anschreiben auf Deutsch",
            "Beziehe dich auf die Stelle/das Unternehmen, falls genannt",
            "Nenne echte Erfahrungen aus dem Profil",
            "Der Hauptteil hat 2-3 Absätze: Interesse an der konkreten Stelle, dann 2-3 relevante "
            "Erfolge passend zur Stelle, dann Begeisterung und Passung",
            "Halte es kurz (insgesamt 300-400 Wörter)",
            "Verwende doppelte Zeilenumbrüche zwischen Absätzen",
            "Vermeide Floskeln wie \"Hiermit bewerbe ich mich\"; beginne mit etwas Ansprechendem",
            "Verwende den vollständigen Namen des Kandidaten als Unterschrift, wenn er bekannt ist, "
            "sonst lass die Unterschrift leer",
        ),
        return_only="Gib NUR das JSON-Objekt zurück.",
    ),
    "fr": LetterInstruction(
        role="Tu es un rédacteur professionnel de lettres de motivation. Rédige une lettre de motivation "
        "convaincante et personnalisée à partir des éléments suivants :",
        request_label="DEMANDE DE L'UTILISATEUR",
        profile_label="PROFIL DU CANDIDAT",
        format_label="Génère la lettre au format JSON suivant :",
        rules_label="IMPORTANT :",
        rules=(
            "Rédige toute la lettre en français",
            "Adapte la lettre au poste/à l'entreprise s'ils sont mentionnés",
            "Appuie-toi sur l'expérience réelle du profil",
            "Le corps comporte 2-3 paragraphes : intérêt pour le poste précis, puis 2-3 réalisations "
            "pertinentes liées au poste, puis enthousiasme et adéquation",
            "Reste concis (300-400 mots au total)",
            "Sépare les paragraphes par un double saut de ligne",
            "Évite les clichés comme \"Je me permets de vous écrire\" ; commence par une accroche",
            "Utilise le nom complet du candidat comme signature s'il est connu, sinon laisse la signature vide",
        ),
        return_only="Renvoie UNIQUEMENT l'objet JSON.",
    ),
    "es": LetterInstruction(
        role="Eres un redactor profesional de cartas de presentación. Genera una carta de presentación "
        "convincente y personalizada a partir de lo siguiente:",
        request_label="SOLICITUD DEL USUARIO",
        profile_label="PERFIL DEL CANDIDATO",
        format_label="Genera la carta en el siguiente formato JSON:",
        rules_label="IMPORTANTE:",
        rules=(
            "Escribe toda la carta en español",
            "Haz la carta específica para el puesto/la empresa si se mencionan",
            "Haz referencia a experiencia real del perfil",
            "El cuerpo tiene 2-3 párrafos: interés en el puesto concreto, luego 2-3 logros relevantes "
            "relacionados con el puesto, luego entusiasmo y encaje",
            "Sé conciso (300-400 palabras en total)",
            "Usa saltos de línea dobles entre párrafos",
            "Evita clichés como \"Le escribo para postularme\"; empieza con algo atractivo",
            "Usa el nombre completo del candidato como firma si se conoce; si no, deja la firma vacía",
        ),
        return_only="Devuelve SOLO el objeto JSON.",
    ),
}

LETTER_JSON_SHAPE = """{
  "recipientName": "Hiring Manager or specific name if mentioned",
  "recipientTitle": "Title if known",
  "companyName": "Company name if mentioned",
  "jobTitle": "Position being applied for",
  "opening": "Salutation line",
  "body": "2-3 paragraphs separated by double line breaks",
  "closing": "Professional closing statement thanking them and expressing desire to discuss further",
  "signature": "Candidate's full name"
}"""


def build_letter_prompt(message: str, profile_text: str, language: str) -> str:
    instruction = LETTER_INSTRUCTIONS.get(language) or LETTER_INSTRUCTIONS["en"]
    rules = "\n".join(f"- {rule}" for rule in instruction.rules)
    return (
        f"{instruction.role}\n\n"
        f"{instruction.request_label}: {message}\n\n"
        f"{instruction.profile_label}:\n{profile_text or '{}'}\n\n"
        f"{instruction.format_label}\n{LETTER_JSON_SHAPE}\n\n"
        f"{instruction.rules_label}\n{rules}\n\n"
        f"{instruction.return_only}"
    )
