"""
================================================================================
TUTORIAL FLOW - PIPELINE STEPS
================================================================================
The six steps that turn a codebase into a tutorial. Each one follows the
prep → exec → post lifecycle described in pipeline/step.py:

    FetchRepo             files, project_name
    IdentifyAbstractions  abstractions
    AnalyzeRelationships  relationships
    OrderChapters         chapter_order
    WriteChapters         chapters          (BatchStep, one item per chapter)
    CombineTutorial       final_output_dir

LLM answers are untrusted. A response that cannot be parsed is retried; a
chapter order that is not a permutation of the abstractions fails the run;
a chapter that forgot its heading gets one.
================================================================================
"""

import logging
import os
import re

from pipeline.errors import InvalidOrderError, MalformedResponseError, PipelineError
from pipeline.state import Abstraction, Relationship, RelationshipMap
from pipeline.step import BatchStep, Step

from utils.call_llm import call_llm
from utils.crawl_local_files import crawl_local_files
from utils.llm_output import load_yaml_response, parse_index

from constants.defaults import ATTRIBUTION, MAX_MERMAID_LABEL_LENGTH
from constants.paths import INDEX_FILE_NAME

logger = logging.getLogger(__name__)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_content_for_indices(files_data, indices):
    """
    Map "index # path" -> content for the requested file indices.

    The key format matches how files are listed in the prompts, so the LLM
    can refer back to them. Out-of-range indices are ignored.
    """
    content_map = {}
    for i in indices:
        if 0 <= i < len(files_data):
            path, content = files_data[i]
            content_map[f"{i} # {path}"] = content
    return content_map


def chapter_filename(position, name):
    """File name of the chapter at 0-based position, e.g. ``01_flow_engine.md``."""
    safe_name = "".join(c if c.isalnum() else "_" for c in name).lower()
    return f"{position + 1:02d}_{safe_name}.md"


def validate_chapter_order(order, num_abstractions):
    """
    Check that order lists every abstraction index exactly once.

    Raises:
        InvalidOrderError: on an out-of-range index, a duplicate, or a
            missing abstraction
    """
    seen = set()
    for idx in order:
        if not (0 <= idx < num_abstractions):
            raise InvalidOrderError(
                f"Invalid index {idx} in chapter order (expected 0..{num_abstractions - 1})",
                order=list(order), expected=num_abstractions,
            )
        if idx in seen:
            raise InvalidOrderError(
                f"Duplicate index {idx} in chapter order",
                order=list(order), expected=num_abstractions,
            )
        seen.add(idx)

    if len(seen) != num_abstractions:
        missing = sorted(set(range(num_abstractions)) - seen)
        raise InvalidOrderError(
            f"Chapter order covers {len(seen)} of {num_abstractions} abstractions. "
            f"Missing indices: {missing}",
            order=list(order), expected=num_abstractions,
        )
    return list(order)


def ensure_chapter_heading(content, chapter_num, abstraction_name):
    """
    Make sure a chapter starts with ``# Chapter N: Name``.

    A wrong first heading is replaced; a missing one is prepended.
    """
    heading = f"# Chapter {chapter_num}: {abstraction_name}"
    lines = content.strip().split("\n")
    if re.match(rf"#\s*Chapter\s+{chapter_num}(?!\d)", lines[0].strip()):
        return "\n".join(lines)
    if lines[0].strip().startswith("#"):
        lines[0] = heading
        return "\n".join(lines)
    body = "\n".join(lines).strip()
    return f"{heading}\n\n{body}" if body else heading


def build_mermaid_diagram(abstractions, relationships):
    """Flowchart with one node per abstraction and one edge per relationship."""
    mermaid_lines = ["flowchart TD"]
    for i, abstr in enumerate(abstractions):
        sanitized_name = abstr.name.replace('"', "")
        mermaid_lines.append(f'    A{i}["{sanitized_name}"]')

    for rel in relationships.details:
        edge_label = rel.label.replace('"', "").replace("\n", " ")
        if len(edge_label) > MAX_MERMAID_LABEL_LENGTH:
            edge_label = edge_label[:MAX_MERMAID_LABEL_LENGTH - 3] + "..."
        mermaid_lines.append(f'    A{rel.source} -- "{edge_label}" --> A{rel.target}')

    return "\n".join(mermaid_lines)


def _is_english(language):
    return language.lower() == "english"


# =============================================================================
# STEP 1: FetchRepo - Collect the source files
# =============================================================================

class FetchRepo(Step):
    """
    Crawl the local directory (or, through an injected crawler, a remote
    repository) and store the matching files as (path, content) pairs.

    remote_crawler, when given, is called with the same keyword arguments as
    crawl_local_files plus repo_url and token, and must return
    {"files": {path: content}}.
    """

    def __init__(self, remote_crawler=None, **kwargs):
        super().__init__(**kwargs)
        self.remote_crawler = remote_crawler

    def prep(self, shared):
        repo_url = shared.repo_url
        local_dir = shared.local_dir
        if not repo_url and not local_dir:
            shared.require("local_dir")
        if repo_url and self.remote_crawler is None:
            raise PipelineError(f"No crawler configured for remote repository {repo_url}")

        project_name = shared.project_name
        if not project_name:
            if repo_url:
                # https://github.com/owner/repo -> repo
                project_name = repo_url.rstrip("/").split("/")[-1].replace(".git", "")
            else:
                project_name = os.path.basename(os.path.abspath(local_dir))

        return {
            "repo_url": repo_url,
            "local_dir": local_dir,
            "token": shared.github_token,
            "project_name": project_name,
            "include_patterns": shared.include_patterns,
            "exclude_patterns": shared.exclude_patterns,
            "max_file_size": shared.max_file_size,
        }

    def exec(self, prep_res):
        crawl_args = {
            "include_patterns": prep_res["include_patterns"],
            "exclude_patterns": prep_res["exclude_patterns"],
            "max_file_size": prep_res["max_file_size"],
            "use_relative_paths": True,
        }
        if prep_res["repo_url"]:
            print(f"Crawling repository: {prep_res['repo_url']}...")
            result = self.remote_crawler(
                repo_url=prep_res["repo_url"], token=prep_res["token"], **crawl_args
            )
        else:
            print(f"Crawling directory: {prep_res['local_dir']}...")
            result = crawl_local_files(directory=prep_res["local_dir"], **crawl_args)

        files_list = list(result.get("files", {}).items())
        if not files_list:
            raise ValueError("Failed to fetch files - no files matched the patterns")
        print(f"Fetched {len(files_list)} files.")
        return files_list

    def post(self, shared, prep_res, exec_res):
        shared.project_name = prep_res["project_name"]
        shared.files = exec_res


# =============================================================================
# STEP 2: IdentifyAbstractions - Find the core concepts
# =============================================================================

class IdentifyAbstractions(Step):
    """
    Ask the LLM for the core abstractions of the codebase, each with a
    beginner-friendly description and the indices of the files behind it.
    """

    def prep(self, shared):
        files_data = shared.require("files")
        project_name = shared.require("project_name")

        context = ""
        file_listing = []
        for i, (path, content) in enumerate(files_data):
            context += f"--- File Index {i}: {path} ---\n{content}\n\n"
            file_listing.append(f"- {i} # {path}")

        return (
            context,
            "\n".join(file_listing),
            len(files_data),
            project_name,
            shared.language,
            shared.use_cache,
            shared.max_abstraction_num,
        )

    def exec(self, prep_res):
        (
            context,
            file_listing,
            file_count,
            project_name,
            language,
            use_cache,
            max_abstraction_num,
        ) = prep_res
        print("Identifying abstractions using LLM...")

        language_instruction = ""
        lang_hint = ""
        if not _is_english(language):
            language_instruction = (
                f"IMPORTANT: Generate the `name` and `description` for each abstraction in "
                f"**{language.capitalize()}** language. Do NOT use English for these fields.\n\n"
            )
            lang_hint = f" (value in {language.capitalize()})"

        prompt = f"""
For the project `{project_name}`:

Codebase Context:
{context}

{language_instruction}Analyze the codebase context.
Identify the top 5-{max_abstraction_num} core most important abstractions to help those new to the codebase.

For each abstraction, provide:
1. A concise `name`{lang_hint}.
2. A beginner-friendly `description` explaining what it is with a simple analogy, in around 100 words{lang_hint}.
3. A list of relevant `file_indices` (integers) using the format `idx # path/comment`.

List of file indices and paths present in the context:
{file_listing}

Format the output as a YAML list of dictionaries:

```yaml
- name: |
    Query Processing{lang_hint}
  description: |
    Explains what the abstraction does.
    It's like a central dispatcher routing requests.{lang_hint}
  file_indices:
    - 0 # path/to/file1.py
    - 3 # path/to/related.py
# ... up to {max_abstraction_num} abstractions
```"""
        # Only the first attempt may be served from the cache
        response = call_llm(prompt, use_cache=(use_cache and self.cur_retry == 0))
        items = load_yaml_response(response, list)

        abstractions = []
        for item in items:
            if not isinstance(item, dict) or not all(
                k in item for k in ("name", "description", "file_indices")
            ):
                raise MalformedResponseError(f"Missing keys in abstraction item: {item}")
            if not isinstance(item["name"], str) or not isinstance(item["description"], str):
                raise MalformedResponseError(f"Name/description is not a string in item: {item}")
            if not isinstance(item["file_indices"], list):
                raise MalformedResponseError(f"file_indices is not a list in item: {item}")

            indices = set()
            for entry in item["file_indices"]:
                idx = parse_index(entry)
                if not (0 <= idx < file_count):
                    raise MalformedResponseError(
                        f"Invalid file index {idx} in item {item['name'].strip()}. "
                        f"Max index is {file_count - 1}."
                    )
                indices.add(idx)

            abstractions.append(Abstraction(
                name=item["name"].strip(),
                description=item["description"].strip(),
                files=tuple(sorted(indices)),
            ))

        if len(abstractions) > max_abstraction_num:
            logger.warning(
                "LLM returned %d abstractions, keeping the first %d",
                len(abstractions), max_abstraction_num,
            )
            abstractions = abstractions[:max_abstraction_num]

        print(f"Identified {len(abstractions)} abstractions.")
        return abstractions

    def post(self, shared, prep_res, exec_res):
        shared.abstractions = exec_res


# =============================================================================
# STEP 3: AnalyzeRelationships - How the concepts interact
# =============================================================================

class AnalyzeRelationships(Step):
    """Ask for a project summary and the key interactions between abstractions."""

    def prep(self, shared):
        abstractions = shared.require("abstractions")
        files_data = shared.require("files")
        project_name = shared.require("project_name")

        context = "Identified Abstractions:\n"
        all_relevant_indices = set()
        abstraction_listing = []
        for i, abstr in enumerate(abstractions):
            file_indices_str = ", ".join(map(str, abstr.files))
            context += (
                f"- Index {i}: {abstr.name} (Relevant file indices: [{file_indices_str}])\n"
                f"  Description: {abstr.description}\n"
            )
            abstraction_listing.append(f"{i} # {abstr.name}")
            all_relevant_indices.update(abstr.files)

        context += "\nRelevant File Snippets (Referenced by Index and Path):\n"
        context += "\n\n".join(
            f"--- File: {idx_path} ---\n{content}"
            for idx_path, content in get_content_for_indices(
                files_data, sorted(all_relevant_indices)
            ).items()
        )

        return (
            context,
            "\n".join(abstraction_listing),
            len(abstractions),
            project_name,
            shared.language,
            shared.use_cache,
        )

    def exec(self, prep_res):
        context, abstraction_listing, num_abstractions, project_name, language, use_cache = prep_res
        print("Analyzing relationships using LLM...")

        language_instruction = ""
        lang_hint = ""
        if not _is_english(language):
            language_instruction = (
                f"IMPORTANT: Generate the `summary` and relationship `label` fields in "
                f"**{language.capitalize()}** language. Do NOT use English for these fields.\n\n"
            )
            lang_hint = f" (in {language.capitalize()})"

        prompt = f"""
Based on the following abstractions and relevant code snippets from the project `{project_name}`:

List of Abstraction Indices and Names:
{abstraction_listing}

Context (Abstractions, Descriptions, Code):
{context}

{language_instruction}Please provide:
1. A high-level `summary` of the project's main purpose and functionality in a few beginner-friendly sentences{lang_hint}. Use markdown formatting with **bold** and *italic* text to highlight important concepts.
2. A list (`relationships`) describing the key interactions between these abstractions. For each relationship, specify:
    - `from_abstraction`: Index of the source abstraction (e.g., `0 # AbstractionName1`)
    - `to_abstraction`: Index of the target abstraction (e.g., `1 # AbstractionName2`)
    - `label`: A brief label for the interaction **in just a few words**{lang_hint} (e.g., "Manages", "Inherits", "Uses").
    Simplify the relationship and exclude those non-important ones.

IMPORTANT: Make sure EVERY abstraction is involved in at least ONE relationship (either as source or target).

Format the output as YAML:

```yaml
summary: |
  A brief, simple explanation of the project{lang_hint}.
relationships:
  - from_abstraction: 0 # AbstractionName1
    to_abstraction: 1 # AbstractionName2
    label: "Manages"{lang_hint}
  # ... other relationships
```

Now, provide the YAML output:
"""
        response = call_llm(prompt, use_cache=(use_cache and self.cur_retry == 0))
        data = load_yaml_response(response, dict)

        if not all(k in data for k in ("summary", "relationships")):
            raise MalformedResponseError("LLM output is missing keys ('summary', 'relationships')")
        if not isinstance(data["summary"], str):
            raise MalformedResponseError("summary is not a string")
        if not isinstance(data["relationships"], list):
            raise MalformedResponseError("relationships is not a list")

        details = []
        for rel in data["relationships"]:
            if not isinstance(rel, dict) or not all(
                k in rel for k in ("from_abstraction", "to_abstraction", "label")
            ):
                raise MalformedResponseError(f"Missing keys in relationship item: {rel}")
            if not isinstance(rel["label"], str):
                raise MalformedResponseError(f"Relationship label is not a string: {rel}")

            source = parse_index(rel["from_abstraction"])
            target = parse_index(rel["to_abstraction"])
            if not (0 <= source < num_abstractions and 0 <= target < num_abstractions):
                raise MalformedResponseError(
                    f"Invalid index in relationship: from={source}, to={target}"
                )
            details.append(Relationship(source=source, target=target, label=rel["label"].strip()))

        print("Generated project summary and relationship details.")
        return RelationshipMap(summary=data["summary"].strip(), details=tuple(details))

    def post(self, shared, prep_res, exec_res):
        shared.relationships = exec_res


# =============================================================================
# STEP 4: OrderChapters - Decide the teaching order
# =============================================================================

class OrderChapters(Step):
    """
    Ask the LLM for the order in which to teach the abstractions.

    The answer must be a permutation of all abstraction indices. An answer
    that cannot be parsed is retried; a parsed answer that is not a
    permutation raises InvalidOrderError and stops the run.
    """

    def prep(self, shared):
        abstractions = shared.require("abstractions")
        relationships = shared.require("relationships")
        project_name = shared.require("project_name")
        language = shared.language

        abstraction_listing = "\n".join(
            f"- {i} # {a.name}" for i, a in enumerate(abstractions)
        )

        summary_note = ""
        list_lang_note = ""
        if not _is_english(language):
            summary_note = f" (Note: Project Summary might be in {language.capitalize()})"
            list_lang_note = f" (Names might be in {language.capitalize()})"

        context = f"Project Summary{summary_note}:\n{relationships.summary}\n\n"
        context += "Relationships (Indices refer to abstractions above):\n"
        for rel in relationships.details:
            from_name = abstractions[rel.source].name
            to_name = abstractions[rel.target].name
            context += f"- From {rel.source} ({from_name}) to {rel.target} ({to_name}): {rel.label}\n"

        return (
            abstraction_listing,
            context,
            len(abstractions),
            project_name,
            list_lang_note,
            shared.use_cache,
        )

    def exec(self, prep_res):
        abstraction_listing, context, num_abstractions, project_name, list_lang_note, use_cache = prep_res

        # Nothing to decide for zero or one chapter
        if num_abstractions <= 1:
            return list(range(num_abstractions))

        print("Determining chapter order using LLM...")
        prompt = f"""
Given the following project abstractions and their relationships for the project `{project_name}`:

Abstractions (Index # Name){list_lang_note}:
{abstraction_listing}

Context about relationships and project summary:
{context}

If you are going to make a tutorial for `{project_name}`, what is the best order to explain these abstractions, from first to last?
Ideally, first explain those that are the most important or foundational, perhaps user-facing concepts or entry points. Then move to more detailed, lower-level implementation details or supporting concepts.

Output the ordered list of abstraction indices, including the name in a comment for clarity. Use the format `idx # AbstractionName`.
Every index must appear exactly once.

```yaml
- 2 # FoundationalConcept
- 0 # CoreClassA
- 1 # CoreClassB (uses CoreClassA)
- ...
```

Now, provide the YAML output:
"""
        response = call_llm(prompt, use_cache=(use_cache and self.cur_retry == 0))
        proposed = [parse_index(entry) for entry in load_yaml_response(response, list)]
        ordered_indices = validate_chapter_order(proposed, num_abstractions)

        print(f"Determined chapter order (indices): {ordered_indices}")
        return ordered_indices

    def post(self, shared, prep_res, exec_res):
        shared.chapter_order = exec_res


# =============================================================================
# STEP 5: WriteChapters - One chapter per abstraction (BatchStep)
# =============================================================================

class WriteChapters(BatchStep):
    """
    Write each chapter with the LLM, in chapter order.

    Each chapter sees the full table of contents and the text of every
    chapter written before it, so items run one after another. The running
    list lives only for the duration of the batch.
    """

    def prep(self, shared):
        chapter_order = shared.require("chapter_order")
        abstractions = shared.require("abstractions")
        files_data = shared.require("files")
        project_name = shared.require("project_name")
        validate_chapter_order(chapter_order, len(abstractions))

        self.chapters_written_so_far = []

        chapter_info = {}
        toc = []
        for i, abstraction_index in enumerate(chapter_order):
            name = abstractions[abstraction_index].name
            filename = chapter_filename(i, name)
            chapter_info[abstraction_index] = {"num": i + 1, "name": name, "filename": filename}
            toc.append(f"{i + 1}. [{name}]({filename})")
        full_chapter_listing = "\n".join(toc)

        items = []
        for i, abstraction_index in enumerate(chapter_order):
            abstraction = abstractions[abstraction_index]
            prev_chapter = chapter_info[chapter_order[i - 1]] if i > 0 else None
            next_chapter = (
                chapter_info[chapter_order[i + 1]] if i < len(chapter_order) - 1 else None
            )
            items.append({
                "chapter_num": i + 1,
                "abstraction": abstraction,
                "related_files_content_map": get_content_for_indices(files_data, abstraction.files),
                "project_name": project_name,
                "full_chapter_listing": full_chapter_listing,
                "prev_chapter": prev_chapter,
                "next_chapter": next_chapter,
                "language": shared.language,
                "use_cache": shared.use_cache,
            })

        print(f"Preparing to write {len(items)} chapters...")
        return items

    def exec(self, item):
        abstraction = item["abstraction"]
        chapter_num = item["chapter_num"]
        language = item["language"]
        print(f"Writing chapter {chapter_num} for: {abstraction.name} using LLM...")

        file_context_str = "\n\n".join(
            f"--- File: {idx_path.split('# ', 1)[-1]} ---\n{content}"
            for idx_path, content in item["related_files_content_map"].items()
        )
        previous_chapters_summary = "\n---\n".join(self.chapters_written_so_far)

        transitions = ""
        if item["prev_chapter"]:
            prev = item["prev_chapter"]
            transitions += f"- Previous chapter: [{prev['name']}]({prev['filename']})\n"
        if item["next_chapter"]:
            nxt = item["next_chapter"]
            transitions += f"- Next chapter: [{nxt['name']}]({nxt['filename']})\n"

        language_instruction = ""
        lang_note = ""
        if not _is_english(language):
            lang_cap = language.capitalize()
            language_instruction = (
                f"IMPORTANT: Write this ENTIRE tutorial chapter in **{lang_cap}**. Translate ALL "
                f"generated content, including explanations, examples and code comments, into "
                f"{lang_cap}. DO NOT use English except in code syntax and proper nouns.\n\n"
            )
            lang_note = f" (in {lang_cap})"

        prompt = f"""
{language_instruction}Write a very beginner-friendly tutorial chapter (in Markdown format) for the project `{item["project_name"]}` about the concept: "{abstraction.name}". This is Chapter {chapter_num}.

Concept Details:
- Name: {abstraction.name}
- Description:
{abstraction.description}

Complete Tutorial Structure:
{item["full_chapter_listing"]}

Neighbouring chapters:
{transitions if transitions else "This is the only chapter."}

Context from previous chapters:
{previous_chapters_summary if previous_chapters_summary else "This is the first chapter."}

Relevant Code Snippets (Code itself remains unchanged):
{file_context_str if file_context_str else "No specific code snippets provided for this abstraction."}

Instructions for the chapter{lang_note}:
- Start with a clear heading (e.g., `# Chapter {chapter_num}: {abstraction.name}`). Use the provided concept name.
- If this is not the first chapter, begin with a brief transition from the previous chapter, referencing it with a proper Markdown link.
- Begin with a high-level motivation explaining what problem this abstraction solves, built around one concrete use case.
- Break complex abstractions down into key concepts and explain them one-by-one.
- Keep each code block BELOW 10 lines and follow each with a beginner friendly explanation.
- Describe the internal implementation, first step-by-step in words (a simple mermaid sequenceDiagram with at most 5 participants helps), then with short code references.
- When referring to other abstractions, ALWAYS link them like [Chapter Title](filename.md) using the Complete Tutorial Structure above.
- Use analogies and examples throughout.
- End with a brief conclusion and, if there is a next chapter, a Markdown link to it.
- Output *only* the Markdown content for this chapter.

Now, directly provide a super beginner-friendly Markdown output (DON'T need ```markdown``` tags):
"""
        chapter_content = call_llm(prompt, use_cache=(item["use_cache"] and self.cur_retry == 0))
        chapter_content = ensure_chapter_heading(chapter_content, chapter_num, abstraction.name)

        self.chapters_written_so_far.append(chapter_content)
        return chapter_content

    def post(self, shared, prep_res, exec_res_list):
        shared.chapters = list(exec_res_list)
        del self.chapters_written_so_far
        print(f"Finished writing {len(exec_res_list)} chapters.")


# =============================================================================
# STEP 6: CombineTutorial - Write the tutorial to disk
# =============================================================================

class CombineTutorial(Step):
    """
    Write index.md (summary, relationship diagram, chapter list) and one
    Markdown file per chapter into <output_dir>/<project_name>.
    """

    def prep(self, shared):
        project_name = shared.require("project_name")
        relationships = shared.require("relationships")
        chapter_order = shared.require("chapter_order")
        abstractions = shared.require("abstractions")
        chapters = shared.require("chapters")
        output_path = os.path.join(shared.output_dir, project_name)

        index_content = f"# Tutorial: {project_name}\n\n"
        index_content += f"{relationships.summary}\n\n"
        if shared.repo_url:
            index_content += f"**Source Repository:** [{shared.repo_url}]({shared.repo_url})\n\n"
        index_content += "```mermaid\n"
        index_content += build_mermaid_diagram(abstractions, relationships) + "\n"
        index_content += "```\n\n"
        index_content += "## Chapters\n\n"

        chapter_files = []
        for i, abstraction_index in enumerate(chapter_order):
            if i >= len(chapters):
                logger.warning("No chapter text for position %d. Skipping.", i + 1)
                continue
            name = abstractions[abstraction_index].name
            filename = chapter_filename(i, name)
            index_content += f"{i + 1}. [{name}]({filename})\n"

            content = chapters[i]
            if not content.endswith("\n\n"):
                content = content.rstrip("\n") + "\n\n"
            content += f"---\n\n{ATTRIBUTION}"
            chapter_files.append({"filename": filename, "content": content})

        index_content += f"\n\n---\n\n{ATTRIBUTION}"

        return {
            "output_path": output_path,
            "index_content": index_content,
            "chapter_files": chapter_files,
        }

    def exec(self, prep_res):
        output_path = prep_res["output_path"]
        print(f"Combining tutorial into directory: {output_path}")
        os.makedirs(output_path, exist_ok=True)

        index_filepath = os.path.join(output_path, INDEX_FILE_NAME)
        with open(index_filepath, "w", encoding="utf-8") as f:
            f.write(prep_res["index_content"])
        print(f"  - Wrote {index_filepath}")

        for chapter in prep_res["chapter_files"]:
            chapter_filepath = os.path.join(output_path, chapter["filename"])
            with open(chapter_filepath, "w", encoding="utf-8") as f:
                f.write(chapter["content"])
            print(f"  - Wrote {chapter_filepath}")

        return output_path

    def post(self, shared, prep_res, exec_res):
        shared.final_output_dir = exec_res
        print(f"\nTutorial generation complete! Files are in: {exec_res}")
