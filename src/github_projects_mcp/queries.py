"""GraphQL query documents for GitHub Projects V2.

Shared selections live in named fragments appended to each document that uses them.
"""

from __future__ import annotations

PROJECT_FRAGMENT = """
fragment ProjectFields on ProjectV2 {
  id
  number
  title
  shortDescription
  public
  closed
  closedAt
  createdAt
  updatedAt
  url
  readme
  owner {
    __typename
    ... on User { login id }
    ... on Organization { login id }
  }
}
""".strip()

PAGE_INFO_FRAGMENT = """
fragment PageInfoFields on PageInfo {
  hasNextPage
  endCursor
}
""".strip()

ITEM_CONTENT_FRAGMENT = """
fragment ItemContentFields on ProjectV2ItemContent {
  __typename
  ... on DraftIssue {
    id
    title
    body
    createdAt
    updatedAt
  }
  ... on Issue {
    id
    number
    title
    body
    state
    url
    createdAt
    updatedAt
    repository { name owner { login } }
  }
  ... on PullRequest {
    id
    number
    title
    body
    state
    merged
    url
    createdAt
    updatedAt
    repository { name owner { login } }
  }
}
""".strip()

FIELD_VALUE_FRAGMENT = """
fragment FieldValueFields on ProjectV2ItemFieldValue {
  __typename
  ... on ProjectV2ItemFieldTextValue {
    text
    field { ... on ProjectV2FieldCommon { id name dataType } }
  }
  ... on ProjectV2ItemFieldNumberValue {
    number
    field { ... on ProjectV2FieldCommon { id name dataType } }
  }
  ... on ProjectV2ItemFieldDateValue {
    date
    field { ... on ProjectV2FieldCommon { id name dataType } }
  }
  ... on ProjectV2ItemFieldSingleSelectValue {
    name
    optionId
    field { ... on ProjectV2FieldCommon { id name dataType } }
  }
  ... on ProjectV2ItemFieldIterationValue {
    title
    iterationId
    startDate
    duration
    field { ... on ProjectV2FieldCommon { id name dataType } }
  }
}
""".strip()

ITEM_FRAGMENT = (
    """
fragment ItemFields on ProjectV2Item {
  id
  type
  createdAt
  updatedAt
  isArchived
  content { ...ItemContentFields }
  fieldValues(first: 50) {
    nodes { ...FieldValueFields }
    pageInfo { ...PageInfoFields }
    totalCount
  }
}
""".strip()
    + "\n"
    + ITEM_CONTENT_FRAGMENT
    + "\n"
    + FIELD_VALUE_FRAGMENT
    + "\n"
    + PAGE_INFO_FRAGMENT
)

FIELD_FRAGMENT = """
fragment FieldConfigurationFields on ProjectV2FieldConfiguration {
  __typename
  ... on ProjectV2Field {
    id
    name
    dataType
  }
  ... on ProjectV2SingleSelectField {
    id
    name
    dataType
    options { id name color description }
  }
  ... on ProjectV2IterationField {
    id
    name
    dataType
    configuration {
      iterations { id title startDate duration }
      completedIterations { id title startDate duration }
      duration
      startDay
    }
  }
}
""".strip()

VIEW_FRAGMENT = """
fragment ViewFields on ProjectV2View {
  id
  name
  number
  layout
  filter
  createdAt
  updatedAt
  sortByFields(first: 20) {
    nodes {
      direction
      field { ... on ProjectV2FieldCommon { id name } }
    }
  }
  groupByFields(first: 20) {
    nodes { ... on ProjectV2FieldCommon { id name } }
  }
}
""".strip()


GET_USER_ID = """
query GetUserId($login: String!) {
  user(login: $login) { id }
}
""".strip()

GET_ORG_ID = """
query GetOrgId($login: String!) {
  organization(login: $login) { id }
}
""".strip()

GET_USER_PROJECTS = (
    """
query GetUserProjects($login: String!, $first: Int!, $after: String) {
  user(login: $login) {
    projectsV2(first: $first, after: $after) {
      nodes { ...ProjectFields }
      pageInfo { ...PageInfoFields }
      totalCount
    }
  }
}
""".strip()
    + "\n"
    + PROJECT_FRAGMENT
    + "\n"
    + PAGE_INFO_FRAGMENT
)

GET_ORG_PROJECTS = (
    """
query GetOrgProjects($login: String!, $first: Int!, $after: String) {
  organization(login: $login) {
    projectsV2(first: $first, after: $after) {
      nodes { ...ProjectFields }
      pageInfo { ...PageInfoFields }
      totalCount
    }
  }
}
""".strip()
    + "\n"
    + PROJECT_FRAGMENT
    + "\n"
    + PAGE_INFO_FRAGMENT
)

GET_USER_PROJECT = (
    """
query GetUserProject($login: String!, $number: Int!) {
  user(login: $login) {
    projectV2(number: $number) { ...ProjectFields }
  }
}
""".strip()
    + "\n"
    + PROJECT_FRAGMENT
)

GET_ORG_PROJECT = (
    """
query GetOrgProject($login: String!, $number: Int!) {
  organization(login: $login) {
    projectV2(number: $number) { ...ProjectFields }
  }
}
""".strip()
    + "\n"
    + PROJECT_FRAGMENT
)

GET_PROJECT_ITEMS = (
    """
query GetProjectItems($projectId: ID!, $first: Int!, $after: String) {
  node(id: $projectId) {
    ... on ProjectV2 {
      items(first: $first, after: $after) {
        nodes { ...ItemFields }
        pageInfo { ...PageInfoFields }
        totalCount
      }
    }
  }
}
""".strip()
    + "\n"
    + ITEM_FRAGMENT
)

GET_PROJECT_ITEM = (
    """
query GetProjectItem($itemId: ID!) {
  node(id: $itemId) {
    ... on ProjectV2Item { ...ItemFields }
  }
}
""".strip()
    + "\n"
    + ITEM_FRAGMENT
)

GET_PROJECT_FIELDS = (
    """
query GetProjectFields($projectId: ID!, $first: Int!, $after: String) {
  node(id: $projectId) {
    ... on ProjectV2 {
      fields(first: $first, after: $after) {
        nodes { ...FieldConfigurationFields }
        pageInfo { ...PageInfoFields }
        totalCount
      }
    }
  }
}
""".strip()
    + "\n"
    + FIELD_FRAGMENT
    + "\n"
    + PAGE_INFO_FRAGMENT
)

GET_PROJECT_VIEWS = (
    """
query GetProjectViews($projectId: ID!, $first: Int!, $after: String) {
  node(id: $projectId) {
    ... on ProjectV2 {
      views(first: $first, after: $after) {
        nodes { ...ViewFields }
        pageInfo { ...PageInfoFields }
        totalCount
      }
    }
  }
}
""".strip()
    + "\n"
    + VIEW_FRAGMENT
    + "\n"
    + PAGE_INFO_FRAGMENT
)

GET_PROJECT_VIEW = (
    """
query GetProjectView($projectId: ID!, $viewNumber: Int!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      view(number: $viewNumber) { ...ViewFields }
    }
  }
}
""".strip()
    + "\n"
    + VIEW_FRAGMENT
)
