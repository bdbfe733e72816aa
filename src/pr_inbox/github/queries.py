"""
GraphQL documents sent to the GitHub API.
"""

OPEN_PULL_REQUESTS_QUERY = """
query OpenPullRequests(
  $owner: String!,
  $name: String!,
  $reviewAuthor: String!,
  $reviewStates: [PullRequestReviewState!],
  $pullRequestLimit: Int!,
  $commentLimit: Int!,
  $reviewRequestLimit: Int!
) {
  repository(owner: $owner, name: $name) {
    description
    pullRequests(states: [OPEN], last: $pullRequestLimit) {
      nodes {
        author { login }
        number
        permalink
        title
        comments(orderBy: {field: UPDATED_AT, direction: DESC}, last: $commentLimit) {
          nodes {
            author { login }
            publishedAt
            body
          }
          pageInfo { endCursor hasNextPage }
        }
        reviews(author: $reviewAuthor, states: $reviewStates, last: 1) {
          nodes {
            author { login }
            publishedAt
            state
            body
          }
          pageInfo { endCursor hasNextPage }
        }
        reviewRequests(last: $reviewRequestLimit) {
          nodes {
            asCodeOwner
            requestedReviewer {
              __typename
              ... on User { login name }
              ... on Team { name }
            }
          }
          pageInfo { endCursor hasNextPage }
        }
      }
      pageInfo { endCursor hasNextPage }
    }
  }
}
"""
