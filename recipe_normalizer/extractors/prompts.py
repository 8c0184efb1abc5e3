"""
Prompts for recipe structuring with the Gemini API.
"""

STRUCTURING_PROMPT = """
The [Input Text] below was collected from a cooking video: its title, pinned comment and
description. It may contain HTML tags, translated duplicates, emoji, hashtags and greetings.

Analyse it and return the recipe it describes, following the [Output Format].

[Input Text]
{text}

[Requirements]
1. Remove HTML tags (<br> etc.), translated duplicates, hashtags (#shorts etc.) and greetings.
2. "recipe" lists every food ingredient (meat, vegetables, seasoning ...) with its amount,
   separated by commas.
3. "method" lists the cooking steps in logical order, numbered 1, 2, 3 ..., one step per line.
4. Only include real ingredients. Cooking actions are not ingredients:
   - NOT ingredients: "while the meat marinates", "mix well", "add", "let it rest"
   - ingredients: "돼지고기 300g", "양파 1개", "고추장 2큰술", "마늘 1스푼"

CRITICAL RULES:
- DO NOT TRANSLATE - keep ingredient names and steps in the ORIGINAL LANGUAGE of the text
- Keep amounts exactly as written (e.g., "2큰술", "300g", "1/2개")
- Use the title, description and comment together to decide the dish name
  (e.g., "제육볶음", "된장찌개", "김치찌개")

[Output Format]
Return ONLY this JSON object, with no explanation before or after it:
{{
  "name": "dish name",
  "color": "#hex6",
  "recipe": "(ingredient) (amount), (ingredient) (amount), ...",
  "method": "1. (first step)\\n2. (second step)\\n..."
}}

- name: the most fitting dish name
- color: one 6-digit hex colour representing the dish (e.g., curry=#F59E0B, 김치찌개=#DC2626, rice=#FBBF24)
- recipe: e.g. "돼지고기 300g, 양파 1개, 고추장 2큰술, 마늘 1스푼"
- method: e.g. "1. 고기를 준비합니다.\\n2. 양파를 썹니다.\\n3. 양념장을 만듭니다."
"""
