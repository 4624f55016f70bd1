"""GraphQL schema definitions for the todo API."""

TYPE_DEFS = """
type Query {
    \"\"\"Get a todo by id. Returns null when it does not exist.\"\"\"
    findTodoById(id: ID!): Todo

    \"\"\"Get all todos. Served from the list cache when possible.\"\"\"
    getAllTodos: [Todo!]!
}

type Mutation {
    \"\"\"Create a todo. New todos are not done.\"\"\"
    createTodo(input: CreateTodoInput!): Todo!

    \"\"\"Update a todo's task and/or done flag.\"\"\"
    updateTodo(id: ID!, input: UpdateTodoInput!): Todo!

    \"\"\"Delete a todo.\"\"\"
    removeTodo(id: ID!): Boolean!
}

type Todo {
    id: ID!
    task: String!
    done: Boolean!
}

input CreateTodoInput {
    task: String!
}

input UpdateTodoInput {
    task: String
    done: Boolean
}
"""
