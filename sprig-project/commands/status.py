# The command: sprig status
# What it does: Provides a summary of the repository state: branches, the staging area, unstaged edits to tracked files and untracked files
# How it does: It builds {name: blob_id} dictionaries for the current tip, the staged additions and the working directory, then compares them name by name
# What data structure it uses: Hash Table / Dictionary (to represent the three states for efficient O(1) average time complexity lookups), Sets (for efficient comparison of file lists)

from utils import repository, objects, index, workdir


def collect_status(repo): # Returns the five status sections as {header: [lines]}
    current_branch = repository.get_current_branch(repo)
    tip_files = index.head_snapshot(repo)
    additions = index.read_additions(repo)
    removals = index.read_removals(repo)
    working_files = workdir.working_files(repo)

    modifications = []
    for name in sorted(set(tip_files) | set(additions)):
        working_hash = working_files.get(name)
        if name in additions:
            if working_hash is None:
                modifications.append(f"{name} (deleted)")
            elif working_hash != objects.blob_id(name, additions[name]):
                modifications.append(f"{name} (modified)")
        elif name not in removals:
            if working_hash is None:
                modifications.append(f"{name} (deleted)")
            elif working_hash != tip_files[name]:
                modifications.append(f"{name} (modified)")

    untracked = [
        name for name in working_files
        if name not in additions and (name not in tip_files or name in removals)
    ]

    return {
        "Branches": [
            f"*{branch}" if branch == current_branch else branch
            for branch in repository.get_all_branches(repo)
        ],
        "Staged Files": sorted(additions),
        "Removed Files": sorted(removals),
        "Modifications Not Staged For Commit": modifications,
        "Untracked Files": sorted(untracked),
    }


def format_status(sections):
    lines = []
    for header, entries in sections.items():
        lines.append(f"=== {header} ===")
        lines.extend(entries)
        lines.append("")
    return "\n".join(lines)


def run(args): # Compares the tip, staging area and working directory and prints the status
    repo = repository.open_repo()
    print(format_status(collect_status(repo)))
