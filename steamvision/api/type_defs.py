from ariadne import gql

type_defs = gql(
    """
    type Query {
      getAllUsers: [User!]!
      me: User
      getMoviesByCategory(category: String!, size: Int = 20): [Show!]!
      getLatestMoviesByCategory(category: String!, size: Int = 20): [Show!]!
      getLatestAll(size: Int = 20): [Show!]!
    }

    type Mutation {
      createUser(
        fullName: String
        userName: String
        email: String
        password: String
        passwordConfirmation: String
        birthday: String
        isAdmin: Boolean
      ): User
      login(email: String, password: String): String
      deleteUser(id: ID): Boolean
      updateUserPassword(
        email: String
        oldPassword: String
        newPassword: String
        code: String
      ): Boolean
      updateUser(
        id: ID
        userName: String
        fullName: String
        email: String
        oldPassword: String
        newPassword: String
        birthday: String
      ): User
      resetUser(email: String): Boolean
      checkVerificationCode(email: String, code: String): String
      saveShow(title: String, thumbnail: String, category: String): Show
      deleteMovie(id: ID): Boolean
    }

    type User {
      id: ID
      fullName: String
      userName: String
      email: String
      birthday: String
      isAdmin: Boolean
    }

    type Show {
      id: ID!
      title: String!
      thumbnail: String!
      category: String!
      createdAt: String!
    }
    """
)
