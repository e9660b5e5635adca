"""GraphQL queries for the user profile card."""

from __future__ import annotations

from ..config import LANGUAGES_PER_REPO, REPOS_PER_PAGE

_USER_QUERY_TEMPLATE = """
query userInfo($login: String!, $cursor: String, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    login
    name
    avatarUrl
    bio
    pronouns
    twitterUsername
    openPRs: pullRequests(states: OPEN) { totalCount }
    closedPRs: pullRequests(states: CLOSED) { totalCount }
    mergedPRs: pullRequests(states: MERGED) { totalCount }
    openIssues: issues(states: OPEN) { totalCount }
    closedIssues: issues(states: CLOSED) { totalCount }
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
    }
    repositories(first: %(per_page)d, ownerAffiliations: OWNER, isFork: false, orderBy: {direction: DESC, field: STARGAZERS}, after: $cursor) {
      totalCount
      pageInfo { hasNextPage endCursor }
      nodes {
        stargazers { totalCount }%(languages)s
      }
    }
  }
}
"""

_LANGUAGES_FRAGMENT = """
        languages(first: %d, orderBy: {field: SIZE, direction: DESC}) {
          edges { size node { color name } }
        }""" % LANGUAGES_PER_REPO

QUERY_WITH_LANGUAGES = _USER_QUERY_TEMPLATE % {
    "per_page": REPOS_PER_PAGE,
    "languages": _LANGUAGES_FRAGMENT,
}

# Lighter variant without per-repo language breakdown.
QUERY_NO_LANGUAGES = _USER_QUERY_TEMPLATE % {
    "per_page": REPOS_PER_PAGE,
    "languages": "",
}


def user_query(include_languages: bool) -> str:
    return QUERY_WITH_LANGUAGES if include_languages else QUERY_NO_LANGUAGES
