"""GraphQL mutation documents for GitHub Projects V2."""

from __future__ import annotations

from .queries import FIELD_FRAGMENT, ITEM_FRAGMENT, PROJECT_FRAGMENT

CREATE_PROJECT = (
    """
mutation CreateProject($input: CreateProjectV2Input!) {
  createProjectV2(input: $input) {
    projectV2 { ...ProjectFields }
  }
}
""".strip()
    + "\n"
    + PROJECT_FRAGMENT
)

UPDATE_PROJECT = (
    """
mutation UpdateProject($input: UpdateProjectV2Input!) {
  updateProjectV2(input: $input) {
    projectV2 { ...ProjectFields }
  }
}
""".strip()
    + "\n"
    + PROJECT_FRAGMENT
)

DELETE_PROJECT = """
mutation DeleteProject($input: DeleteProjectV2Input!) {
  deleteProjectV2(input: $input) {
    projectV2 { id }
  }
}
""".strip()

ADD_DRAFT_ISSUE = (
    """
mutation AddDraftIssue($input: AddProjectV2DraftIssueInput!) {
  addProjectV2DraftIssue(input: $input) {
    projectItem { ...ItemFields }
  }
}
""".strip()
    + "\n"
    + ITEM_FRAGMENT
)

ADD_ITEM_BY_ID = (
    """
mutation AddItemById($input: AddProjectV2ItemByIdInput!) {
  addProjectV2ItemById(input: $input) {
    item { ...ItemFields }
  }
}
""".strip()
    + "\n"
    + ITEM_FRAGMENT
)

UPDATE_ITEM_FIELD_VALUE = (
    """
mutation UpdateItemFieldValue($input: UpdateProjectV2ItemFieldValueInput!) {
  updateProjectV2ItemFieldValue(input: $input) {
    projectV2Item { ...ItemFields }
  }
}
""".strip()
    + "\n"
    + ITEM_FRAGMENT
)

DELETE_ITEM = """
mutation DeleteItem($input: DeleteProjectV2ItemInput!) {
  deleteProjectV2Item(input: $input) {
    deletedItemId
  }
}
""".strip()

CREATE_FIELD = (
    """
mutation CreateField($input: CreateProjectV2FieldInput!) {
  createProjectV2Field(input: $input) {
    projectV2Field { ...FieldConfigurationFields }
  }
}
""".strip()
    + "\n"
    + FIELD_FRAGMENT
)

UPDATE_FIELD = (
    """
mutation UpdateField($input: UpdateProjectV2FieldInput!) {
  updateProjectV2Field(input: $input) {
    projectV2Field { ...FieldConfigurationFields }
  }
}
""".strip()
    + "\n"
    + FIELD_FRAGMENT
)

DELETE_FIELD = """
mutation DeleteField($input: DeleteProjectV2FieldInput!) {
  deleteProjectV2Field(input: $input) {
    projectV2Field {
      __typename
      ... on ProjectV2FieldCommon { id }
    }
  }
}
""".strip()
